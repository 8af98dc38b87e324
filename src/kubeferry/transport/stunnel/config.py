"""Rendering of stunnel configuration files.

Output is line oriented ``key = value`` text with a single ``[rsync]``
service section. Client configs may tunnel through an HTTP CONNECT proxy,
server configs always connect straight to the local sync tool.
"""

from kubeferry.core.models import ConfigurationError, TransportOptions

CERT_PATH = "/etc/stunnel/certs/tls.crt"
KEY_PATH = "/etc/stunnel/certs/tls.key"
SERVICE_NAME = "rsync"


def _check_port(name: str, port: int) -> None:
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
        raise ConfigurationError(f"{name} must be a port number between 1 and 65535, got {port!r}")


def _global_section(client: bool) -> list[str]:
    lines = [
        "pid =",
        "sslVersion = TLSv1.2",
    ]
    if client:
        lines.append("client = yes")
    lines += [
        "syslog = no",
        "output = /dev/stdout",
    ]
    return lines


def _service_section(accept_port: int) -> list[str]:
    return [
        f"[{SERVICE_NAME}]",
        "debug = 7",
        f"accept = {accept_port}",
        f"cert = {CERT_PATH}",
        f"key = {KEY_PATH}",
    ]


def _verify(options: TransportOptions) -> list[str]:
    if options.no_verify_ca:
        return []
    return [f"verify = {options.resolved_ca_verify_level()}"]


def _join(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


def render_client_config(accept_port: int, hostname: str, port: int, options: TransportOptions) -> str:
    """Render the config for the tunnel end that dials out to the endpoint.

    Args:
        accept_port: Local port the client tunnel listens on
        hostname: Endpoint hostname to connect to
        port: Externally exposed endpoint port
        options: Transport options (proxy and CA verification)

    The result may contain proxy credentials and must not be logged.
    """
    _check_port("accept port", accept_port)
    _check_port("endpoint port", port)
    if not hostname:
        raise ConfigurationError("endpoint hostname must not be empty")

    lines = _global_section(client=True) + _service_section(accept_port)

    if options.proxy_url:
        lines += [
            "protocol = connect",
            f"connect = {options.proxy_url}",
            f"protocolHost = {hostname}:{port}",
        ]
        if options.proxy_username:
            lines.append(f"protocolUsername = {options.proxy_username}")
        if options.proxy_password:
            lines.append(f"protocolPassword = {options.proxy_password}")
    else:
        lines.append(f"connect = {hostname}:{port}")

    lines += _verify(options)
    return _join(lines)


def render_server_config(accept_port: int, connect_port: int, options: TransportOptions) -> str:
    """Render the config for the tunnel end that terminates in the destination pod.

    Args:
        accept_port: Port the server tunnel listens on behind the endpoint
        connect_port: Port of the sync tool in the same pod
        options: Transport options (CA verification)
    """
    _check_port("accept port", accept_port)
    _check_port("connect port", connect_port)

    lines = _global_section(client=False) + _service_section(accept_port)
    lines.append(f"connect = localhost:{connect_port}")
    lines += _verify(options)
    return _join(lines)
