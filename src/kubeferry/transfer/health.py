"""Readiness checks for transfer pods.

Transfer pods run two containers, the transport and the sync tool. The checks
return ``(healthy, error)`` pairs: a pod still starting up is not healthy and
the error explains why, while a failing API call is handed back the same way
so callers polling for readiness can decide what to retry.
"""

from collections.abc import Mapping

from kubernetes import client

from kubeferry.core.interfaces import ClusterClient
from kubeferry.core.models import AggregateError, NamespacedName, PodHealthError

EXPECTED_CONTAINERS = 2


def label_selector(labels: Mapping[str, str]) -> str:
    """Format a label set as a selector string."""
    return ",".join(f"{k}={v}" for k, v in labels.items())


async def is_pod_healthy(c: ClusterClient, pod: NamespacedName) -> tuple[bool, Exception | None]:
    """Check whether a single pod has all its containers ready."""
    try:
        p = await c.get("Pod", pod)
    except Exception as e:
        return False, e

    return are_containers_ready(p)


def are_containers_ready(pod: client.V1Pod) -> tuple[bool, Exception | None]:
    key = NamespacedName(pod.metadata.namespace, pod.metadata.name)
    statuses = (pod.status.container_statuses if pod.status else None) or []

    # Any other count means the pod was not built as a transfer pod
    if len(statuses) != EXPECTED_CONTAINERS:
        return False, PodHealthError(
            f"expected {EXPECTED_CONTAINERS} container statuses found {len(statuses)}, for pod {key}",
            pod=key,
        )

    for status in statuses:
        if not status.ready:
            return False, PodHealthError(
                f"container {status.name} in pod {key} is not ready",
                pod=key,
                container=status.name,
            )
    return True, None


async def are_filtered_pods_healthy(
    c: ClusterClient, namespace: str, labels: Mapping[str, str]
) -> tuple[bool, Exception | None]:
    """Check whether at least one pod matching ``labels`` is healthy.

    Only one ready replica is needed. If none is ready the reasons for every
    pod are returned together; no matching pods at all is not an error.
    """
    try:
        pods = await c.list("Pod", namespace, label_selector(labels))
    except Exception as e:
        return False, e

    errors: list[Exception] = []
    for p in pods:
        ready, err = are_containers_ready(p)
        if ready:
            return True, None
        if err is not None:
            errors.append(err)

    return False, AggregateError.from_errors(errors)
