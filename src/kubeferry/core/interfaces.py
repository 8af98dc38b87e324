"""Core interfaces for kubeferry."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from kubernetes import client

from .models import NamespacedName, PVCPairList, TransportOptions


class ClusterClient(ABC):
    """Interface for Kubernetes cluster clients.

    Objects are ``kubernetes.client`` models (``V1ConfigMap``, ``V1Secret``,
    ``V1Pod``). Implementations raise ``NotFoundError`` from ``get`` and
    ``AlreadyExistsError`` from ``create`` so callers can branch on them.
    """

    @abstractmethod
    async def get(self, kind: str, key: NamespacedName) -> Any:
        """Get a single namespaced object."""
        pass

    @abstractmethod
    async def create(self, obj: Any) -> Any:
        """Create an object."""
        pass

    @abstractmethod
    async def update(self, obj: Any) -> Any:
        """Replace an existing object."""
        pass

    @abstractmethod
    async def list(self, kind: str, namespace: str, label_selector: Optional[str] = None) -> List[Any]:
        """List objects of a kind in a namespace, optionally filtered by labels."""
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        """Check if client is connected to cluster."""
        pass


class Endpoint(ABC):
    """A reachable network endpoint provisioned for the destination side.

    Endpoints are created elsewhere; kubeferry only reads them.
    """

    @abstractmethod
    def hostname(self) -> str:
        """Hostname the source side connects to."""
        pass

    @abstractmethod
    def port(self) -> int:
        """Port the tunnel listens on behind the endpoint."""
        pass

    @abstractmethod
    def exposed_port(self) -> int:
        """Port reachable from outside the destination cluster."""
        pass

    @abstractmethod
    def labels(self) -> Dict[str, str]:
        """Labels applied to generated objects and used to select pods."""
        pass

    @abstractmethod
    def namespaced_name(self) -> NamespacedName:
        """Identity of the endpoint object."""
        pass


class Transport(ABC):
    """Interface for the channel between the two sides of a transfer."""

    @abstractmethod
    def options(self) -> TransportOptions:
        """Get the options the transport was built with."""
        pass

    @abstractmethod
    def direct(self) -> bool:
        """True when traffic goes straight to the endpoint without a local tunnel."""
        pass

    @abstractmethod
    def port(self) -> int:
        """Local port the tunnel listens on."""
        pass

    @abstractmethod
    def type(self) -> str:
        """Name of the transport variant."""
        pass

    @abstractmethod
    def client_containers(self) -> List[client.V1Container]:
        """Containers to add to the client pod, set by ``create_client``."""
        pass

    @abstractmethod
    def server_containers(self) -> List[client.V1Container]:
        """Containers to add to the server pod, set by ``create_server``."""
        pass

    @abstractmethod
    def client_volumes(self) -> List[client.V1Volume]:
        """Volumes backing the client containers, set by ``create_client``."""
        pass

    @abstractmethod
    def server_volumes(self) -> List[client.V1Volume]:
        """Volumes backing the server containers, set by ``create_server``."""
        pass

    @abstractmethod
    async def create_client(self, c: ClusterClient, prefix: str, e: Endpoint) -> None:
        """Provision client side objects and compute client containers and volumes."""
        pass

    @abstractmethod
    async def create_server(self, c: ClusterClient, prefix: str, e: Endpoint) -> None:
        """Provision server side objects and compute server containers and volumes."""
        pass


class Transfer(ABC):
    """Interface for moving volume data from a source to a destination cluster."""

    @abstractmethod
    def source(self) -> ClusterClient:
        """Client for the source cluster."""
        pass

    @abstractmethod
    def destination(self) -> ClusterClient:
        """Client for the destination cluster."""
        pass

    @abstractmethod
    def endpoint(self) -> Endpoint:
        """Endpoint used by the transfer."""
        pass

    @abstractmethod
    def transport(self) -> Transport:
        """Transport used by the transfer."""
        pass

    @abstractmethod
    async def create_server(self, c: ClusterClient) -> None:
        """Create the transfer server on the given cluster."""
        pass

    @abstractmethod
    async def create_client(self, c: ClusterClient) -> None:
        """Create the transfer client on the given cluster."""
        pass

    @abstractmethod
    async def is_server_healthy(self, c: ClusterClient) -> tuple[bool, Optional[Exception]]:
        """Check whether the server side is ready to accept data."""
        pass

    @abstractmethod
    def pvcs(self) -> PVCPairList:
        """Claims the transfer will migrate."""
        pass
