"""Cluster objects and pod fragments shared by both tunnel ends."""

import base64
import logging

from kubernetes import client

from kubeferry.core.interfaces import ClusterClient
from kubeferry.core.models import AlreadyExistsError, NamespacedName
from kubeferry.transport.stunnel.constants import (
    CERTS_MOUNT_PATH,
    CONFIG_KEY,
    CONFIG_MOUNT_PATH,
    CRT_KEY,
    KEY_KEY,
    STUNNEL_COMMAND,
    STUNNEL_CONTAINER,
)

logger = logging.getLogger(__name__)


def build_config_map(key: NamespacedName, labels: dict[str, str], conf: str) -> client.V1ConfigMap:
    return client.V1ConfigMap(
        api_version="v1",
        kind="ConfigMap",
        metadata=client.V1ObjectMeta(name=key.name, namespace=key.namespace, labels=dict(labels)),
        data={CONFIG_KEY: conf},
    )


def build_secret(key: NamespacedName, labels: dict[str, str], crt: bytes, tls_key: bytes) -> client.V1Secret:
    # V1Secret.data holds base64 text
    return client.V1Secret(
        api_version="v1",
        kind="Secret",
        metadata=client.V1ObjectMeta(name=key.name, namespace=key.namespace, labels=dict(labels)),
        data={
            CRT_KEY: base64.b64encode(crt).decode("ascii"),
            KEY_KEY: base64.b64encode(tls_key).decode("ascii"),
        },
    )


async def create_or_update_config_map(c: ClusterClient, config_map: client.V1ConfigMap) -> None:
    """Create the config map, replacing its content if it already exists."""
    key = NamespacedName(config_map.metadata.namespace, config_map.metadata.name)
    try:
        await c.create(config_map)
        logger.info(f"[STUNNEL] Created config map {key}")
    except AlreadyExistsError:
        await c.update(config_map)
        logger.info(f"[STUNNEL] Config map {key} exists, updated")


async def create_secret_once(c: ClusterClient, secret: client.V1Secret) -> None:
    """Create the secret, leaving an existing one untouched.

    Both tunnel ends trust the certificate stored here, rotating it needs a
    separate procedure that updates both sides together.
    """
    key = NamespacedName(secret.metadata.namespace, secret.metadata.name)
    try:
        await c.create(secret)
        logger.info(f"[STUNNEL] Created secret {key}")
    except AlreadyExistsError:
        logger.debug(f"[STUNNEL] Secret {key} already exists, keeping it")


def build_containers(image: str, port: int, config_volume: str, secret_volume: str) -> list[client.V1Container]:
    return [
        client.V1Container(
            name=STUNNEL_CONTAINER,
            image=image,
            command=list(STUNNEL_COMMAND),
            ports=[
                client.V1ContainerPort(
                    name="stunnel",
                    protocol="TCP",
                    container_port=port,
                )
            ],
            volume_mounts=[
                client.V1VolumeMount(
                    name=config_volume,
                    mount_path=CONFIG_MOUNT_PATH,
                    sub_path=CONFIG_KEY,
                ),
                client.V1VolumeMount(
                    name=secret_volume,
                    mount_path=CERTS_MOUNT_PATH,
                ),
            ],
        )
    ]


def build_volumes(
    config_volume: str, config_map_name: str, secret_volume: str, secret_name: str
) -> list[client.V1Volume]:
    return [
        client.V1Volume(
            name=config_volume,
            config_map=client.V1ConfigMapVolumeSource(name=config_map_name),
        ),
        client.V1Volume(
            name=secret_volume,
            secret=client.V1SecretVolumeSource(
                secret_name=secret_name,
                items=[
                    client.V1KeyToPath(key=CRT_KEY, path=CRT_KEY),
                    client.V1KeyToPath(key=KEY_KEY, path=KEY_KEY),
                ],
            ),
        ),
    ]
