"""Contract tests for idempotent checks.

Repeated checks of the same address against a stable DNS environment
yield the same code.
"""

import asyncio

import dns.resolver

from email_dns_checker.services.email_checker import check_email


async def _check_twice(email):
    return await check_email(email), await check_email(email)


def test_repeated_valid_check(mock_resolver):
    first, second = asyncio.run(_check_twice("user@example.com"))
    assert first == second
    assert first.code == 0


def test_repeated_failed_check(mock_resolver):
    mock_resolver.resolve.side_effect = dns.resolver.NXDOMAIN()

    first, second = asyncio.run(_check_twice("user@missing.example"))

    assert first.code == second.code == 3


def test_concurrent_checks_are_independent(mock_resolver):
    """Verify interleaved checks do not affect each other's result."""

    async def run():
        return await asyncio.gather(
            check_email("user@example.com"),
            check_email("not-an-email"),
            check_email("user@example.org"),
        )

    results = asyncio.run(run())

    assert [result.code for result in results] == [0, 1, 0]
