"""Entry points that drive any Transfer implementation."""

import logging

from kubeferry.core.interfaces import Transfer
from kubeferry.k8s.scheme import server_scheme

logger = logging.getLogger(__name__)

LOCALHOST = "localhost"


async def create_server(t: Transfer) -> None:
    """Create the transfer server on the destination cluster.

    The kinds the server side deploys (routes, apps and core objects) must be
    known before anything is sent to the cluster.

    Raises:
        ConfigurationError: if a server side kind cannot be registered
    """
    scheme = server_scheme()
    logger.debug(f"[TRANSFER] Registered {len(scheme)} server side kinds")

    await t.create_server(t.destination())


async def delete_server(t: Transfer) -> None:
    """Remove the transfer server.

    Nothing is deleted here. Cleanup of generated objects is left to the
    caller, typically through owner references on the objects it creates.
    """
    logger.debug("[TRANSFER] delete_server has nothing to remove")


async def create_client(t: Transfer) -> None:
    """Create the transfer client on the source cluster."""
    await t.create_client(t.source())


async def delete_client(t: Transfer) -> None:
    """Remove the transfer client. See ``delete_server``."""
    logger.debug("[TRANSFER] delete_client has nothing to remove")


def connection_hostname(t: Transfer) -> str:
    """Hostname the source side connects to for reaching the destination.

    A tunneled transport terminates in the client pod and forwards from there,
    so the address is local unless the transport is direct.
    """
    if t.transport().direct():
        return t.endpoint().hostname()
    return LOCALHOST


def connection_port(t: Transfer) -> int:
    """Port matching ``connection_hostname``."""
    if t.transport().direct():
        return t.endpoint().exposed_port()
    return t.transport().port()
