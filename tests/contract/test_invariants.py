"""Contract tests for check_email() invariants.

check_email() returns a classified result for every failure reachable
during the query phase and never lets an exception escape.
"""

import asyncio
import time

import dns.exception
import dns.resolver
import pytest

from email_dns_checker.config import Config
from email_dns_checker.models.dns_result import DNSResult, ResultCode
from email_dns_checker.services.email_checker import check_email


@pytest.mark.parametrize(
    "exception, expected_code",
    [
        (dns.resolver.NXDOMAIN(), ResultCode.DNS_QUERY_FAILED),
        (dns.exception.Timeout(), ResultCode.DNS_QUERY_FAILED),
        (dns.resolver.NoNameservers(), ResultCode.DNS_QUERY_FAILED),
        (dns.resolver.NoResolverConfiguration(), ResultCode.DNS_QUERY_FAILED),
        (dns.exception.SyntaxError(), ResultCode.DNS_QUERY_FAILED),
        (ConnectionResetError("reset by peer"), ResultCode.UNEXPECTED_ERROR),
        (KeyError("answer"), ResultCode.UNEXPECTED_ERROR),
        (TypeError("unsupported"), ResultCode.UNEXPECTED_ERROR),
    ],
)
def test_query_errors_are_returned_not_raised(mock_resolver, exception, expected_code):
    mock_resolver.resolve.side_effect = exception

    result = asyncio.run(check_email("user@example.com"))

    assert isinstance(result, DNSResult)
    assert result.code == expected_code


@pytest.mark.parametrize("email", [None, 0, "", "@", "@@", "a@b@c.com", " "])
def test_odd_inputs_are_format_failures(mock_resolver, email):
    result = asyncio.run(check_email(email))
    assert result.code == ResultCode.INVALID_EMAIL


async def _check_against_silent_nameserver(timeout):
    """Run check_email() against a local TCP server that never answers.

    Returns the result and the elapsed seconds.
    """

    async def accept_and_stay_silent(reader, writer):
        try:
            await reader.read()
        except ConnectionError:
            pass
        finally:
            writer.close()

    server = await asyncio.start_server(accept_and_stay_silent, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    config = Config(
        dns_nameservers=["127.0.0.1"], dns_port=port, dns_use_cache=False
    )

    try:
        start = time.monotonic()
        result = await asyncio.wait_for(
            check_email("user@example.com", timeout=timeout, config=config), 10
        )
        elapsed = time.monotonic() - start
    finally:
        server.close()
        await server.wait_closed()

    return result, elapsed


def test_silent_nameserver_times_out_close_to_timeout():
    """Verify a non-responding server yields code 3 after about the timeout."""
    result, elapsed = asyncio.run(_check_against_silent_nameserver(timeout=1))

    assert result.code == ResultCode.DNS_QUERY_FAILED
    assert result.message.startswith("DNS query failed: ")
    assert 0.9 <= elapsed < 3
