"""Client end of the stunnel transport, running next to the source volumes."""

from typing import TYPE_CHECKING

from kubernetes import client

from kubeferry.core.interfaces import ClusterClient, Endpoint
from kubeferry.core.models import AggregateError, NamespacedName
from kubeferry.transport.stunnel.config import render_client_config
from kubeferry.transport.stunnel.constants import (
    DEFAULT_STUNNEL_CLIENT_CONFIG,
    DEFAULT_STUNNEL_CLIENT_SECRET,
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


async def create_client_resources(c: ClusterClient, s: "StunnelTransport", prefix: str, e: Endpoint) -> None:
    errors: list[Exception] = []

    try:
        await create_client_config(c, s, prefix, e)
    except Exception as err:
        errors.append(err)

    try:
        await create_client_secret(c, s, prefix, e)
    except Exception as err:
        errors.append(err)

    s._client_containers = client_containers(s)
    s._client_volumes = client_volumes(prefix)

    aggregate = AggregateError.from_errors(errors)
    if aggregate is not None:
        raise aggregate


def client_config_key(s: "StunnelTransport", prefix: str) -> NamespacedName:
    return NamespacedName(s.namespace_pair().source.namespace, with_prefix(prefix, DEFAULT_STUNNEL_CLIENT_CONFIG))


def client_secret_key(s: "StunnelTransport", prefix: str) -> NamespacedName:
    return NamespacedName(s.namespace_pair().source.namespace, with_prefix(prefix, DEFAULT_STUNNEL_CLIENT_SECRET))


async def create_client_config(c: ClusterClient, s: "StunnelTransport", prefix: str, e: Endpoint) -> None:
    conf = render_client_config(
        accept_port=s.port(),
        hostname=e.hostname(),
        port=e.exposed_port(),
        options=s.options(),
    )
    await create_or_update_config_map(c, build_config_map(client_config_key(s, prefix), e.labels(), conf))


async def create_client_secret(c: ClusterClient, s: "StunnelTransport", prefix: str, e: Endpoint) -> None:
    await create_secret_once(c, build_secret(client_secret_key(s, prefix), e.labels(), s.crt(), s.key()))


async def get_client_config(c: ClusterClient, s: "StunnelTransport", prefix: str) -> client.V1ConfigMap:
    return await c.get("ConfigMap", client_config_key(s, prefix))


async def get_client_secret(c: ClusterClient, s: "StunnelTransport", prefix: str) -> client.V1Secret:
    return await c.get("Secret", client_secret_key(s, prefix))


def client_containers(s: "StunnelTransport") -> list[client.V1Container]:
    return build_containers(
        image=s.image(),
        port=s.port(),
        config_volume=DEFAULT_STUNNEL_CLIENT_CONFIG,
        secret_volume=DEFAULT_STUNNEL_CLIENT_SECRET,
    )


def client_volumes(prefix: str) -> list[client.V1Volume]:
    return build_volumes(
        config_volume=DEFAULT_STUNNEL_CLIENT_CONFIG,
        config_map_name=with_prefix(prefix, DEFAULT_STUNNEL_CLIENT_CONFIG),
        secret_volume=DEFAULT_STUNNEL_CLIENT_SECRET,
        secret_name=with_prefix(prefix, DEFAULT_STUNNEL_CLIENT_SECRET),
    )
