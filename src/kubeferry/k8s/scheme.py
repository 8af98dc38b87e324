"""Registry of the resource kinds a transfer side works with."""

from typing import Any

from kubernetes import client

from kubeferry.core.models import ConfigurationError

ROUTE_API_VERSION = "route.openshift.io/v1"


class Scheme:
    """Maps ``(api_version, kind)`` to the model used to build objects of that kind.

    Kinds without a typed model in ``kubernetes.client`` (OpenShift routes)
    are registered as plain dicts, the way custom objects are handled.
    """

    def __init__(self) -> None:
        self._kinds: dict[tuple[str, str], Any] = {}

    def add_known_type(self, api_version: str, kind: str, model: Any) -> None:
        if model is None:
            raise ConfigurationError(f"no model available for {api_version}/{kind}")
        self._kinds[(api_version, kind)] = model

    def recognizes(self, api_version: str, kind: str) -> bool:
        return (api_version, kind) in self._kinds

    def model_for(self, api_version: str, kind: str) -> Any:
        try:
            return self._kinds[(api_version, kind)]
        except KeyError:
            raise ConfigurationError(f"{api_version}/{kind} is not registered") from None

    def __len__(self) -> int:
        return len(self._kinds)


def _model(name: str) -> Any:
    return getattr(client, name, None)


def add_core_to_scheme(scheme: Scheme) -> None:
    for kind in ("ConfigMap", "Secret", "Pod", "Service"):
        scheme.add_known_type("v1", kind, _model(f"V1{kind}"))


def add_apps_to_scheme(scheme: Scheme) -> None:
    for kind in ("Deployment", "StatefulSet"):
        scheme.add_known_type("apps/v1", kind, _model(f"V1{kind}"))


def add_route_to_scheme(scheme: Scheme) -> None:
    scheme.add_known_type(ROUTE_API_VERSION, "Route", dict)


def server_scheme() -> Scheme:
    """Build the scheme holding every kind the server side creates."""
    scheme = Scheme()
    add_route_to_scheme(scheme)
    add_apps_to_scheme(scheme)
    add_core_to_scheme(scheme)
    return scheme
