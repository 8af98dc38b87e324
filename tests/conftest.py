"""Shared fixtures."""

import pytest
from fakes import TEST_CRT, TEST_KEY, FakeClusterClient, FakeEndpoint

from kubeferry.core.models import NamespacedName, NamespacedNamePair, TransportOptions
from kubeferry.transport.stunnel import StunnelTransport


@pytest.fixture
def ns_pair() -> NamespacedNamePair:
    return NamespacedNamePair(
        source=NamespacedName("source-ns", "data"),
        destination=NamespacedName("dest-ns", "data"),
    )


@pytest.fixture
def cluster() -> FakeClusterClient:
    return FakeClusterClient()


@pytest.fixture
def endpoint() -> FakeEndpoint:
    return FakeEndpoint()


@pytest.fixture
def transport(ns_pair: NamespacedNamePair) -> StunnelTransport:
    return StunnelTransport(TEST_CRT, TEST_KEY, ns_pair, options=TransportOptions())
