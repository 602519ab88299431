"""Email domain validator: syntax check followed by an MX query."""

import time
from typing import Optional

from email_dns_checker.config import DEFAULT_DNS_TIMEOUT, Config
from email_dns_checker.models.dns_result import DNSResult
from email_dns_checker.models.mx_query import (
    MXAnswer,
    MXQueryOutcome,
    ProtocolFailure,
)
from email_dns_checker.services.dns_checker import query_mx
from email_dns_checker.services.logger import log_email_check
from email_dns_checker.utils.domain_utils import extract_domain, is_valid_domain


def classify_outcome(outcome: MXQueryOutcome) -> DNSResult:
    """Map an MX query outcome to a result.

    Args:
        outcome: Value returned by query_mx().

    Returns:
        DNSResult: Code 0 with records, 2 without, 3 for a protocol
        failure and 4 for anything else.
    """
    if isinstance(outcome, MXAnswer):
        if outcome.has_records():
            return DNSResult.valid()
        return DNSResult.domain_not_found()

    if isinstance(outcome, ProtocolFailure):
        return DNSResult.dns_query_failed(outcome.message)

    return DNSResult.unexpected_error(outcome.message)


async def check_email(
    email: str,
    timeout: Optional[int] = None,
    config: Optional[Config] = None,
) -> DNSResult:
    """Check whether an email address's domain can receive mail.

    Malformed addresses and domains fail fast without a network call.
    Every failure is returned as a DNSResult; nothing is raised.

    Args:
        email: Email address to check.
        timeout: DNS timeout in seconds. Falls back to config.dns_timeout,
            then to 5 seconds.
        config: Resolver options. Defaults to cache on, TCP only and the
            system nameservers.

    Returns:
        DNSResult: Classified outcome.

    Example:
        From synchronous code, run the coroutine with asyncio.run();
        a domain with mail exchangers yields code 0 and the message
        "Email domain is valid.".
    """
    start = time.monotonic()

    if config is None:
        config = Config()
    if timeout is None:
        timeout = config.dns_timeout or DEFAULT_DNS_TIMEOUT

    domain = extract_domain(email)
    if domain is None or not is_valid_domain(domain):
        result = DNSResult.invalid_email()
        log_email_check(
            domain=domain,
            code=result.code,
            failure_type=None,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return result

    outcome = await query_mx(
        domain,
        timeout=timeout,
        nameservers=config.dns_nameservers,
        use_cache=config.dns_use_cache,
        tcp_only=config.dns_tcp_only,
        port=config.dns_port,
    )
    result = classify_outcome(outcome)

    log_email_check(
        domain=domain,
        code=result.code,
        failure_type=(
            outcome.failure_type if isinstance(outcome, ProtocolFailure) else None
        ),
        duration_ms=int((time.monotonic() - start) * 1000),
    )
    return result
