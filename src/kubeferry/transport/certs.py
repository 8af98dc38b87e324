"""TLS material for tunneled transports."""

import datetime

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

DEFAULT_COMMON_NAME = "kubeferry.transfer"
DEFAULT_VALIDITY_DAYS = 365


def generate_certificate(
    common_name: str = DEFAULT_COMMON_NAME, days: int = DEFAULT_VALIDITY_DAYS
) -> tuple[bytes, bytes]:
    """Generate a self-signed certificate and its private key.

    The same pair is mounted on both sides of the tunnel, so the certificate
    also acts as the CA each side verifies its peer against.

    Returns:
        PEM encoded ``(certificate, private_key)``
    """
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.datetime.now(datetime.timezone.utc)

    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(minutes=5))
        .not_valid_after(now + datetime.timedelta(days=days))
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .add_extension(x509.SubjectAlternativeName([x509.DNSName(common_name)]), critical=False)
        .sign(key, hashes.SHA256())
    )

    crt_pem = cert.public_bytes(serialization.Encoding.PEM)
    key_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return crt_pem, key_pem
