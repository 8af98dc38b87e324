"""Unit tests for TLS material generation."""

from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.x509.oid import NameOID

from kubeferry.transport.certs import generate_certificate


class TestGenerateCertificate:
    """Test generate_certificate."""

    def test_pair_matches(self):
        """Test the key belongs to the certificate."""
        crt_pem, key_pem = generate_certificate()

        cert = x509.load_pem_x509_certificate(crt_pem)
        key = serialization.load_pem_private_key(key_pem, password=None)

        assert cert.public_key().public_numbers() == key.public_key().public_numbers()

    def test_self_signed_ca(self):
        """Test the certificate is its own issuer and may sign."""
        crt_pem, _ = generate_certificate(common_name="transfer.example")

        cert = x509.load_pem_x509_certificate(crt_pem)

        assert cert.subject == cert.issuer
        assert cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)[0].value == "transfer.example"
        assert cert.extensions.get_extension_for_class(x509.BasicConstraints).value.ca is True

    def test_fresh_pair_each_call(self):
        """Test two calls never share a key."""
        assert generate_certificate()[1] != generate_certificate()[1]
