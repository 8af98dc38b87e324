"""TLS tunnel transport backed by stunnel."""

import logging

from kubernetes import client

from kubeferry.core.interfaces import ClusterClient, Endpoint, Transport
from kubeferry.core.models import NamespacedNamePair, TransportOptions
from kubeferry.transport.certs import generate_certificate
from kubeferry.transport.stunnel.client import create_client_resources
from kubeferry.transport.stunnel.constants import DEFAULT_STUNNEL_IMAGE, DEFAULT_STUNNEL_PORT, TRANSPORT_TYPE
from kubeferry.transport.stunnel.server import create_server_resources

logger = logging.getLogger(__name__)


class StunnelTransport(Transport):
    """Encrypts traffic between the two sides with an stunnel sidecar.

    The certificate and key are fixed for the lifetime of the instance. Both
    ends mount the same pair, so replacing it on one side only would break
    the tunnel.
    """

    def __init__(
        self,
        crt: bytes,
        key: bytes,
        ns_pair: NamespacedNamePair,
        options: TransportOptions | None = None,
        image: str | None = None,
        port: int = DEFAULT_STUNNEL_PORT,
    ):
        self._crt = bytes(crt)
        self._key = bytes(key)
        self._ns_pair = ns_pair
        self._options = options or TransportOptions()
        self._image = image
        self._port = port

        self._client_containers: list[client.V1Container] = []
        self._client_volumes: list[client.V1Volume] = []
        self._server_containers: list[client.V1Container] = []
        self._server_volumes: list[client.V1Volume] = []

    @classmethod
    def new(
        cls,
        ns_pair: NamespacedNamePair,
        options: TransportOptions | None = None,
        image: str | None = None,
    ) -> "StunnelTransport":
        """Create a transport with a freshly generated certificate and key."""
        crt, key = generate_certificate()
        logger.debug(f"[STUNNEL] Generated TLS material for {ns_pair.source} -> {ns_pair.destination}")
        return cls(crt, key, ns_pair, options=options, image=image)

    def crt(self) -> bytes:
        return self._crt

    def key(self) -> bytes:
        return self._key

    def namespace_pair(self) -> NamespacedNamePair:
        return self._ns_pair

    def image(self) -> str:
        return self._image or DEFAULT_STUNNEL_IMAGE

    def options(self) -> TransportOptions:
        return self._options

    def direct(self) -> bool:
        return False

    def port(self) -> int:
        return self._port

    def type(self) -> str:
        return TRANSPORT_TYPE

    def client_containers(self) -> list[client.V1Container]:
        return self._client_containers

    def server_containers(self) -> list[client.V1Container]:
        return self._server_containers

    def client_volumes(self) -> list[client.V1Volume]:
        return self._client_volumes

    def server_volumes(self) -> list[client.V1Volume]:
        return self._server_volumes

    async def create_client(self, c: ClusterClient, prefix: str, e: Endpoint) -> None:
        """Provision the client config map and secret in the source namespace.

        Raises:
            AggregateError: if creating the config map, the secret or both failed
        """
        await create_client_resources(c, self, prefix, e)

    async def create_server(self, c: ClusterClient, prefix: str, e: Endpoint) -> None:
        """Provision the server config map and secret in the destination namespace.

        Raises:
            AggregateError: if creating the config map, the secret or both failed
        """
        await create_server_resources(c, self, prefix, e)
