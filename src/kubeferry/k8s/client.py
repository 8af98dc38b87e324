"""Kubernetes client implementation."""

import asyncio
import json
import logging
from typing import Any, Callable

from kubernetes import client, config
from kubernetes.client.exceptions import ApiException

from kubeferry.core.interfaces import ClusterClient
from kubeferry.core.models import AlreadyExistsError, ClusterAPIError, NamespacedName, NotFoundError
from kubeferry.utils.config import TransferConfig

logger = logging.getLogger(__name__)

# Model classes for the kinds the client can handle
KIND_MODELS: dict[str, type] = {
    "ConfigMap": client.V1ConfigMap,
    "Secret": client.V1Secret,
    "Pod": client.V1Pod,
}


def kind_of(obj: Any) -> str:
    """Get the kind of a ``kubernetes.client`` model instance."""
    kind = getattr(obj, "kind", None)
    if kind:
        return kind
    for name, model in KIND_MODELS.items():
        if isinstance(obj, model):
            return name
    raise ValueError(f"Unsupported object type: {type(obj).__name__}")


def status_reason(e: ApiException) -> str | None:
    """Get the ``reason`` of the Status object in the response body, if any."""
    body = e.body
    if not body:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        status = json.loads(body)
    except (TypeError, ValueError):
        return None
    if not isinstance(status, dict):
        return None
    return status.get("reason") or None


def translate_api_exception(e: ApiException, what: str) -> ClusterAPIError:
    """Convert an ``ApiException`` into the matching kubeferry error.

    A 409 is only "already exists" when the Status reason says so, stale
    updates come back as 409 with reason ``Conflict``.
    """
    reason = status_reason(e) or e.reason
    message = f"{what}: {reason}"
    if e.status == 404:
        return NotFoundError(message, reason=reason)
    if e.status == 409 and reason == "AlreadyExists":
        return AlreadyExistsError(message, reason=reason)
    return ClusterAPIError(message, status=e.status, reason=reason)


class K8sClient(ClusterClient):
    """Kubernetes client implementation."""

    def __init__(self, kubeconfig_path: str | None = None, context: str | None = None):
        """Initialize Kubernetes client."""
        self.kubeconfig_path = kubeconfig_path
        self.context = context
        self._api_client: client.ApiClient | None = None
        self._core_v1: client.CoreV1Api | None = None

    @classmethod
    def from_config(cls, cfg: TransferConfig) -> "K8sClient":
        """Build a client for the kubeconfig and context named in ``cfg``."""
        return cls(kubeconfig_path=cfg.kubeconfig, context=cfg.context)

    async def _ensure_connected(self) -> None:
        """Ensure client is connected."""
        if self._api_client is None:
            try:
                if self.kubeconfig_path or self.context:
                    self._api_client = config.new_client_from_config(
                        config_file=self.kubeconfig_path, context=self.context
                    )
                else:
                    # Try in-cluster config first, then default kubeconfig
                    try:
                        config.load_incluster_config()
                        self._api_client = client.ApiClient()
                    except config.ConfigException:
                        self._api_client = config.new_client_from_config()

                self._core_v1 = client.CoreV1Api(self._api_client)

            except Exception as e:
                self._api_client = None
                raise ConnectionError(f"Failed to connect to Kubernetes cluster: {e}") from e

    def is_connected(self) -> bool:
        """Check if client is connected to cluster."""
        return self._api_client is not None

    def _operations(self, kind: str) -> dict[str, Callable[..., Any]]:
        """Get the CoreV1 calls backing each verb for ``kind``."""
        assert self._core_v1 is not None
        api = self._core_v1
        table = {
            "ConfigMap": {
                "get": api.read_namespaced_config_map,
                "create": api.create_namespaced_config_map,
                "update": api.replace_namespaced_config_map,
                "list": api.list_namespaced_config_map,
            },
            "Secret": {
                "get": api.read_namespaced_secret,
                "create": api.create_namespaced_secret,
                "update": api.replace_namespaced_secret,
                "list": api.list_namespaced_secret,
            },
            "Pod": {
                "get": api.read_namespaced_pod,
                "create": api.create_namespaced_pod,
                "update": api.replace_namespaced_pod,
                "list": api.list_namespaced_pod,
            },
        }
        if kind not in table:
            raise ValueError(f"Unsupported resource kind: {kind}")
        return table[kind]

    async def get(self, kind: str, key: NamespacedName) -> Any:
        """Get a single namespaced object."""
        await self._ensure_connected()
        read = self._operations(kind)["get"]

        try:
            return await asyncio.to_thread(read, name=key.name, namespace=key.namespace)
        except ApiException as e:
            raise translate_api_exception(e, f"Failed to get {kind} {key}") from e

    async def create(self, obj: Any) -> Any:
        """Create an object in the namespace set on its metadata."""
        await self._ensure_connected()
        kind = kind_of(obj)
        create = self._operations(kind)["create"]
        key = NamespacedName(obj.metadata.namespace, obj.metadata.name)

        try:
            result = await asyncio.to_thread(create, namespace=key.namespace, body=obj)
            logger.debug(f"[K8S] Created {kind} {key}")
            return result
        except ApiException as e:
            raise translate_api_exception(e, f"Failed to create {kind} {key}") from e

    async def update(self, obj: Any) -> Any:
        """Replace an existing object."""
        await self._ensure_connected()
        kind = kind_of(obj)
        replace = self._operations(kind)["update"]
        key = NamespacedName(obj.metadata.namespace, obj.metadata.name)

        try:
            result = await asyncio.to_thread(replace, name=key.name, namespace=key.namespace, body=obj)
            logger.debug(f"[K8S] Updated {kind} {key}")
            return result
        except ApiException as e:
            raise translate_api_exception(e, f"Failed to update {kind} {key}") from e

    async def list(self, kind: str, namespace: str, label_selector: str | None = None) -> list[Any]:
        """List objects of a kind in a namespace."""
        await self._ensure_connected()
        list_namespaced = self._operations(kind)["list"]

        try:
            if label_selector:
                response = await asyncio.to_thread(
                    list_namespaced, namespace=namespace, label_selector=label_selector
                )
            else:
                response = await asyncio.to_thread(list_namespaced, namespace=namespace)
            return list(response.items)
        except ApiException as e:
            raise translate_api_exception(e, f"Failed to list {kind} in {namespace}") from e

    async def close(self) -> None:
        """Close the client connection."""
        if self._api_client and hasattr(self._api_client, 'close'):
            if asyncio.iscoroutinefunction(self._api_client.close):
                await self._api_client.close()
            else:
                self._api_client.close()
        self._api_client = None
        self._core_v1 = None
