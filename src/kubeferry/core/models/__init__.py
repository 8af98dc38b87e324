"""Core domain models for kubeferry."""

from kubeferry.core.models.errors import (
    AggregateError,
    AlreadyExistsError,
    ClusterAPIError,
    ConfigurationError,
    KubeferryError,
    NotFoundError,
    PodHealthError,
)
from kubeferry.core.models.transport import (
    NamespacedName,
    NamespacedNamePair,
    PVCPair,
    PVCPairList,
    TransportOptions,
)

__all__ = [
    "AggregateError",
    "AlreadyExistsError",
    "ClusterAPIError",
    "ConfigurationError",
    "KubeferryError",
    "NamespacedName",
    "NamespacedNamePair",
    "NotFoundError",
    "PVCPair",
    "PVCPairList",
    "PodHealthError",
    "TransportOptions",
]
