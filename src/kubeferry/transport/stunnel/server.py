"""Server end of the stunnel transport, running next to the destination volumes."""

from typing import TYPE_CHECKING

from kubernetes import client

from kubeferry.core.interfaces import ClusterClient, Endpoint
from kubeferry.core.models import AggregateError, NamespacedName
from kubeferry.transport.stunnel.config import render_server_config
from kubeferry.transport.stunnel.constants import (
    DEFAULT_RSYNC_PORT,
    DEFAULT_STUNNEL_SERVER_CONFIG,
    DEFAULT_STUNNEL_SERVER_SECRET,
    with_prefix,
)
from kubeferry.transport.stunnel.resources import (
    build_config_map,
    build_containers,
    build_secret,
    build_volumes,
    create_or_update_config_map,
    create_secret_once,
)

if TYPE_CHECKING:
    from kubeferry.transport.stunnel.transport import StunnelTransport


async def create_server_resources(c: ClusterClient, s: "StunnelTransport", prefix: str, e: Endpoint) -> None:
    errors: list[Exception] = []

    try:
        await create_server_config(c, s, prefix, e)
    except Exception as err:
        errors.append(err)

    try:
        await create_server_secret(c, s, prefix, e)
    except Exception as err:
        errors.append(err)

    s._server_containers = server_containers(s, e)
    s._server_volumes = server_volumes(prefix)

    aggregate = AggregateError.from_errors(errors)
    if aggregate is not None:
        raise aggregate


def server_config_key(s: "StunnelTransport", prefix: str) -> NamespacedName:
    return NamespacedName(
        s.namespace_pair().destination.namespace, with_prefix(prefix, DEFAULT_STUNNEL_SERVER_CONFIG)
    )


def server_secret_key(s: "StunnelTransport", prefix: str) -> NamespacedName:
    return NamespacedName(
        s.namespace_pair().destination.namespace, with_prefix(prefix, DEFAULT_STUNNEL_SERVER_SECRET)
    )


async def create_server_config(c: ClusterClient, s: "StunnelTransport", prefix: str, e: Endpoint) -> None:
    # The endpoint forwards to e.port() inside the pod, the sync tool sits behind the tunnel
    conf = render_server_config(accept_port=e.port(), connect_port=DEFAULT_RSYNC_PORT, options=s.options())
    await create_or_update_config_map(c, build_config_map(server_config_key(s, prefix), e.labels(), conf))


async def create_server_secret(c: ClusterClient, s: "StunnelTransport", prefix: str, e: Endpoint) -> None:
    await create_secret_once(c, build_secret(server_secret_key(s, prefix), e.labels(), s.crt(), s.key()))


async def get_server_config(c: ClusterClient, s: "StunnelTransport", prefix: str) -> client.V1ConfigMap:
    return await c.get("ConfigMap", server_config_key(s, prefix))


async def get_server_secret(c: ClusterClient, s: "StunnelTransport", prefix: str) -> client.V1Secret:
    return await c.get("Secret", server_secret_key(s, prefix))


def server_containers(s: "StunnelTransport", e: Endpoint) -> list[client.V1Container]:
    return build_containers(
        image=s.image(),
        port=e.port(),
        config_volume=DEFAULT_STUNNEL_SERVER_CONFIG,
        secret_volume=DEFAULT_STUNNEL_SERVER_SECRET,
    )


def server_volumes(prefix: str) -> list[client.V1Volume]:
    return build_volumes(
        config_volume=DEFAULT_STUNNEL_SERVER_CONFIG,
        config_map_name=with_prefix(prefix, DEFAULT_STUNNEL_SERVER_CONFIG),
        secret_volume=DEFAULT_STUNNEL_SERVER_SECRET,
        secret_name=with_prefix(prefix, DEFAULT_STUNNEL_SERVER_SECRET),
    )
