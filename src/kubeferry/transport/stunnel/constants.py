"""Names, keys and paths shared by the stunnel client and server."""

TRANSPORT_TYPE = "stunnel"

STUNNEL_CONTAINER = "stunnel"
DEFAULT_STUNNEL_IMAGE = "quay.io/konveyor/rsync-transfer:latest"
DEFAULT_STUNNEL_PORT = 2222
# Port the sync tool listens on next to the server tunnel
DEFAULT_RSYNC_PORT = 8080

DEFAULT_STUNNEL_CLIENT_CONFIG = "crane2-stunnel-client-config"
DEFAULT_STUNNEL_SERVER_CONFIG = "crane2-stunnel-server-config"
DEFAULT_STUNNEL_CLIENT_SECRET = "crane2-stunnel-client-secret"
DEFAULT_STUNNEL_SERVER_SECRET = "crane2-stunnel-server-secret"

CONFIG_KEY = "stunnel.conf"
CRT_KEY = "tls.crt"
KEY_KEY = "tls.key"

CONFIG_MOUNT_PATH = "/etc/stunnel/stunnel.conf"
CERTS_MOUNT_PATH = "/etc/stunnel/certs"
STUNNEL_COMMAND = ["/bin/stunnel", CONFIG_MOUNT_PATH]


def with_prefix(prefix: str, name: str) -> str:
    """Get the object name for ``name`` scoped to ``prefix``."""
    return f"{prefix}-{name}"
