"""Loading transfer settings from YAML files."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from kubeferry.core.models import ConfigurationError, TransportOptions
from kubeferry.utils.logging import setup_logging

_KNOWN_KEYS = {"transport", "image", "kubeconfig", "context", "log_level"}


@dataclass
class TransferConfig:
    """Settings for building a transport and its cluster clients."""

    transport: TransportOptions = field(default_factory=TransportOptions)
    image: str | None = None
    kubeconfig: str | None = None
    context: str | None = None
    log_level: str = "INFO"

    def configure_logging(self, log_file: str | None = None) -> logging.Logger:
        """Set up the package logger at ``log_level``."""
        return setup_logging(self.log_level, log_file=log_file)


def load_config(path: str | Path | None) -> TransferConfig:
    """Load settings from ``path``.

    Example::

        transport:
          caVerifyLevel: "2"
          proxyURL: proxy.example.com:3128
        image: quay.io/konveyor/rsync-transfer:latest
        log_level: DEBUG

    A missing file gives the defaults.
    """
    if path is None or not Path(path).exists():
        return TransferConfig()

    with open(path) as f:
        try:
            data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse {path}: {e}") from e

    if data is None:
        return TransferConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping, got {type(data).__name__}")

    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigurationError(f"Unknown keys in {path}: {', '.join(sorted(unknown))}")

    transport = data.get("transport") or {}
    if not isinstance(transport, dict):
        raise ConfigurationError(f"'transport' in {path} must be a mapping")

    return TransferConfig(
        transport=TransportOptions.from_dict(transport),
        image=data.get("image"),
        kubeconfig=data.get("kubeconfig"),
        context=data.get("context"),
        log_level=str(data.get("log_level") or "INFO"),
    )
