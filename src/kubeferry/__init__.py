"""kubeferry - TLS tunneled volume data transfer between Kubernetes clusters."""

from kubeferry.core import ClusterClient, Endpoint, Transfer, Transport, TransportOptions
from kubeferry.transport import StunnelTransport

__version__ = "0.1.0"
__all__ = ["ClusterClient", "Endpoint", "StunnelTransport", "Transfer", "Transport", "TransportOptions"]
