"""stunnel based TLS transport."""

from kubeferry.transport.stunnel.client import get_client_config, get_client_secret
from kubeferry.transport.stunnel.config import render_client_config, render_server_config
from kubeferry.transport.stunnel.constants import (
    DEFAULT_STUNNEL_CLIENT_CONFIG,
    DEFAULT_STUNNEL_CLIENT_SECRET,
    DEFAULT_STUNNEL_IMAGE,
    DEFAULT_STUNNEL_PORT,
    DEFAULT_STUNNEL_SERVER_CONFIG,
    DEFAULT_STUNNEL_SERVER_SECRET,
    STUNNEL_CONTAINER,
    with_prefix,
)
from kubeferry.transport.stunnel.server import get_server_config, get_server_secret
from kubeferry.transport.stunnel.transport import StunnelTransport

__all__ = [
    "DEFAULT_STUNNEL_CLIENT_CONFIG",
    "DEFAULT_STUNNEL_CLIENT_SECRET",
    "DEFAULT_STUNNEL_IMAGE",
    "DEFAULT_STUNNEL_PORT",
    "DEFAULT_STUNNEL_SERVER_CONFIG",
    "DEFAULT_STUNNEL_SERVER_SECRET",
    "STUNNEL_CONTAINER",
    "StunnelTransport",
    "get_client_config",
    "get_client_secret",
    "get_server_config",
    "get_server_secret",
    "render_client_config",
    "render_server_config",
    "with_prefix",
]
