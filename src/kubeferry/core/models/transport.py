"""Transport options and object naming models."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

# stunnel accepts verify levels 0 (none) through 4 (pin peer certificate)
CA_VERIFY_LEVELS = ("0", "1", "2", "3", "4")
DEFAULT_CA_VERIFY_LEVEL = "2"

_OPTION_KEYS = {
    "ca_verify_level": "ca_verify_level",
    "caVerifyLevel": "ca_verify_level",
    "proxy_url": "proxy_url",
    "proxyURL": "proxy_url",
    "proxy_username": "proxy_username",
    "proxyUsername": "proxy_username",
    "proxy_password": "proxy_password",
    "proxyPassword": "proxy_password",
    "no_verify_ca": "no_verify_ca",
    "noVerifyCA": "no_verify_ca",
}


@dataclass(frozen=True)
class TransportOptions:
    """Options shared by every transport variant."""

    ca_verify_level: str = ""
    proxy_url: str = ""
    proxy_username: str = ""
    proxy_password: str = field(default="", repr=False)
    no_verify_ca: bool = False

    def __post_init__(self) -> None:
        # Imported here, errors.py depends on this module.
        from kubeferry.core.models.errors import ConfigurationError

        if self.ca_verify_level not in ("",) + CA_VERIFY_LEVELS:
            raise ConfigurationError(
                f"invalid CA verify level {self.ca_verify_level!r}, expected one of {', '.join(CA_VERIFY_LEVELS)}"
            )

    def resolved_ca_verify_level(self) -> str:
        """Get the CA verify level, falling back to the default."""
        return self.ca_verify_level or DEFAULT_CA_VERIFY_LEVEL

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransportOptions":
        """Build options from a mapping using snake_case or camelCase keys."""
        from kubeferry.core.models.errors import ConfigurationError

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in _OPTION_KEYS:
                raise ConfigurationError(f"unknown transport option {key!r}")
            attr = _OPTION_KEYS[key]
            if attr == "no_verify_ca":
                if not isinstance(value, bool):
                    raise ConfigurationError(f"transport option {key!r} must be a boolean")
                kwargs[attr] = value
            else:
                kwargs[attr] = "" if value is None else str(value)
        return cls(**kwargs)


@dataclass(frozen=True)
class NamespacedName:
    """Namespace and name identifying a namespaced object."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class NamespacedNamePair:
    """Source and destination identities of an object being moved."""

    source: NamespacedName
    destination: NamespacedName


@dataclass(frozen=True)
class PVCPair:
    """A source claim and the destination claim its data goes to."""

    source: NamespacedName
    destination: NamespacedName


@dataclass
class PVCPairList:
    """Ordered list of claim pairs a transfer migrates."""

    pairs: list[PVCPair] = field(default_factory=list)

    @classmethod
    def from_names(
        cls,
        source_namespace: str,
        destination_namespace: str,
        names: Iterable[tuple[str, str]],
    ) -> "PVCPairList":
        """Build a list from ``(source_name, destination_name)`` tuples."""
        return cls(
            [
                PVCPair(
                    source=NamespacedName(source_namespace, src),
                    destination=NamespacedName(destination_namespace, dst),
                )
                for src, dst in names
            ]
        )

    def __iter__(self) -> Iterator[PVCPair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __getitem__(self, index: int) -> PVCPair:
        return self.pairs[index]

    def sources(self) -> list[NamespacedName]:
        return [p.source for p in self.pairs]

    def destinations(self) -> list[NamespacedName]:
        return [p.destination for p in self.pairs]

    def get_by_source(self, name: str) -> PVCPair | None:
        """Get the pair whose source claim is called ``name``."""
        for pair in self.pairs:
            if pair.source.name == name:
                return pair
        return None

    def in_source_namespace(self, namespace: str) -> "PVCPairList":
        """Get the pairs whose source claim lives in ``namespace``."""
        return PVCPairList([p for p in self.pairs if p.source.namespace == namespace])
