"""Core domain models and interfaces for kubeferry."""

from kubeferry.core.interfaces import ClusterClient, Endpoint, Transfer, Transport
from kubeferry.core.models import NamespacedName, PVCPairList, TransportOptions

__all__ = ["ClusterClient", "Endpoint", "NamespacedName", "PVCPairList", "Transfer", "Transport", "TransportOptions"]
