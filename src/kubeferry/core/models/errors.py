"""Error types raised and returned by kubeferry."""

from collections.abc import Iterable

from kubeferry.core.models.transport import NamespacedName


class KubeferryError(Exception):
    """Base class for all kubeferry errors."""


class ConfigurationError(KubeferryError):
    """Invalid transport options or a config that cannot be rendered."""


class ClusterAPIError(KubeferryError):
    """A request against the cluster API failed."""

    def __init__(self, message: str, status: int | None = None, reason: str | None = None):
        super().__init__(message)
        self.status = status
        self.reason = reason


class NotFoundError(ClusterAPIError):
    """The requested object does not exist (HTTP 404)."""

    def __init__(self, message: str, reason: str | None = "NotFound"):
        super().__init__(message, status=404, reason=reason)


class AlreadyExistsError(ClusterAPIError):
    """An object with the same name already exists (HTTP 409)."""

    def __init__(self, message: str, reason: str | None = "AlreadyExists"):
        super().__init__(message, status=409, reason=reason)


class PodHealthError(KubeferryError):
    """A pod failed a readiness check.

    These describe the state of the probed pod rather than an infrastructure
    failure, so health checks hand them back as values.
    """

    def __init__(self, message: str, pod: NamespacedName, container: str | None = None):
        super().__init__(message)
        self.pod = pod
        self.container = container


class AggregateError(KubeferryError):
    """Several independent failures reported together."""

    def __init__(self, errors: list[BaseException]):
        self.errors = list(errors)
        super().__init__(str(self))

    @classmethod
    def from_errors(cls, errors: Iterable[BaseException | None]) -> "AggregateError | None":
        """Build an aggregate from ``errors``, ignoring ``None`` entries.

        Returns ``None`` when there is nothing to report.
        """
        found = [e for e in errors if e is not None]
        if not found:
            return None
        return cls(found)

    def __str__(self) -> str:
        if len(self.errors) == 1:
            return str(self.errors[0])
        return "[" + ", ".join(str(e) for e in self.errors) + "]"

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)
