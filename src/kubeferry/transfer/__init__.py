"""Transfer orchestration."""

from kubeferry.core.interfaces import Transfer
from kubeferry.core.models import PVCPair, PVCPairList
from kubeferry.transfer.health import are_containers_ready, are_filtered_pods_healthy, is_pod_healthy
from kubeferry.transfer.transfer import (
    connection_hostname,
    connection_port,
    create_client,
    create_server,
    delete_client,
    delete_server,
)

__all__ = [
    "PVCPair",
    "PVCPairList",
    "Transfer",
    "are_containers_ready",
    "are_filtered_pods_healthy",
    "connection_hostname",
    "connection_port",
    "create_client",
    "create_server",
    "delete_client",
    "delete_server",
    "is_pod_healthy",
]
