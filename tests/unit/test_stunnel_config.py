"""Unit tests for stunnel config rendering."""

import pytest

from kubeferry.core.models import ConfigurationError, TransportOptions
from kubeferry.transport.stunnel.config import render_client_config, render_server_config


def client_lines(options: TransportOptions) -> list[str]:
    conf = render_client_config(accept_port=2222, hostname="dest.example.com", port=443, options=options)
    return conf.splitlines()


class TestClientConfig:
    """Test client side config rendering."""

    def test_full_layout(self):
        """Test the rendered config line by line."""
        assert client_lines(TransportOptions()) == [
            "pid =",
            "sslVersion = TLSv1.2",
            "client = yes",
            "syslog = no",
            "output = /dev/stdout",
            "[rsync]",
            "debug = 7",
            "accept = 2222",
            "cert = /etc/stunnel/certs/tls.crt",
            "key = /etc/stunnel/certs/tls.key",
            "connect = dest.example.com:443",
            "verify = 2",
        ]

    def test_ends_with_newline(self):
        """Test the file ends with a newline."""
        conf = render_client_config(2222, "dest.example.com", 443, TransportOptions())
        assert conf.endswith("\n")

    def test_default_verify_level(self):
        """Test an unset verify level renders as 2."""
        assert "verify = 2" in client_lines(TransportOptions(ca_verify_level=""))

    def test_custom_verify_level(self):
        """Test an explicit verify level is rendered."""
        lines = client_lines(TransportOptions(ca_verify_level="0"))

        assert "verify = 0" in lines
        assert "verify = 2" not in lines

    def test_no_verify_ca(self):
        """Test no verify line at all when CA verification is off."""
        lines = client_lines(TransportOptions(no_verify_ca=True, ca_verify_level="3"))

        assert not any(line.startswith("verify") for line in lines)

    def test_proxy(self):
        """Test connecting through a proxy."""
        lines = client_lines(TransportOptions(proxy_url="proxy.example.com:3128"))

        assert "protocol = connect" in lines
        assert "connect = proxy.example.com:3128" in lines
        assert "protocolHost = dest.example.com:443" in lines
        assert "connect = dest.example.com:443" not in lines
        assert not any(line.startswith("protocolUsername") for line in lines)
        assert not any(line.startswith("protocolPassword") for line in lines)

    def test_proxy_credentials(self):
        """Test proxy credentials are rendered verbatim."""
        lines = client_lines(
            TransportOptions(proxy_url="proxy:3128", proxy_username="alice", proxy_password="p@ss word")
        )

        assert "protocolUsername = alice" in lines
        assert "protocolPassword = p@ss word" in lines

    def test_proxy_username_only(self):
        """Test an empty password is left out."""
        lines = client_lines(TransportOptions(proxy_url="proxy:3128", proxy_username="alice"))

        assert "protocolUsername = alice" in lines
        assert not any(line.startswith("protocolPassword") for line in lines)

    def test_credentials_ignored_without_proxy(self):
        """Test credentials have no effect when no proxy is set."""
        lines = client_lines(TransportOptions(proxy_username="alice", proxy_password="secret"))

        assert not any(line.startswith("protocol") for line in lines)

    @pytest.mark.parametrize("port", [0, 70000, "443", None])
    def test_invalid_port(self, port):
        """Test ports outside the valid range are rejected."""
        with pytest.raises(ConfigurationError):
            render_client_config(2222, "dest.example.com", port, TransportOptions())

    def test_empty_hostname(self):
        """Test an endpoint without hostname is rejected."""
        with pytest.raises(ConfigurationError):
            render_client_config(2222, "", 443, TransportOptions())


class TestServerConfig:
    """Test server side config rendering."""

    def test_full_layout(self):
        """Test the rendered config line by line."""
        conf = render_server_config(accept_port=2222, connect_port=8080, options=TransportOptions())

        assert conf.splitlines() == [
            "pid =",
            "sslVersion = TLSv1.2",
            "syslog = no",
            "output = /dev/stdout",
            "[rsync]",
            "debug = 7",
            "accept = 2222",
            "cert = /etc/stunnel/certs/tls.crt",
            "key = /etc/stunnel/certs/tls.key",
            "connect = localhost:8080",
            "verify = 2",
        ]

    def test_never_uses_proxy(self):
        """Test the server ignores proxy settings."""
        conf = render_server_config(2222, 8080, TransportOptions(proxy_url="proxy:3128", proxy_password="x"))

        assert "protocol" not in conf
        assert "proxy" not in conf

    def test_no_verify_ca(self):
        """Test no verify line when CA verification is off."""
        conf = render_server_config(2222, 8080, TransportOptions(no_verify_ca=True))

        assert "verify" not in conf
