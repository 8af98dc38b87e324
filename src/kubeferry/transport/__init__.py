"""Transport implementations."""

from kubeferry.transport.certs import generate_certificate
from kubeferry.transport.stunnel import StunnelTransport

__all__ = ["StunnelTransport", "generate_certificate"]
