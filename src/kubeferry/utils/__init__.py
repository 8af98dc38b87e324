"""Utility functions."""

from kubeferry.utils.config import TransferConfig, load_config
from kubeferry.utils.logging import setup_logging

__all__ = ["TransferConfig", "load_config", "setup_logging"]
