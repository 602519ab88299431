"""pytest fixtures for testing."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch


def make_mx_rdata(preference: int, exchange: str) -> MagicMock:
    """Build a stand-in for a dnspython MX rdata."""
    rdata = MagicMock()
    rdata.preference = preference
    rdata.exchange.to_text.return_value = exchange
    return rdata


@pytest.fixture
def mx_rdata():
    """Factory for MX rdata stand-ins."""
    return make_mx_rdata


@pytest.fixture
def mock_resolver():
    """Patch the async resolver class and yield the instance it returns.

    By default the MX query answers with a single record.
    """
    with patch(
        "email_dns_checker.services.dns_checker.dns.asyncresolver.Resolver"
    ) as mock_resolver_class:
        resolver = MagicMock()
        resolver.resolve = AsyncMock(
            return_value=[make_mx_rdata(10, "mx1.example.com.")]
        )
        mock_resolver_class.return_value = resolver
        resolver.resolver_class = mock_resolver_class
        yield resolver
