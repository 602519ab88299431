"""DNS checker service for MX queries."""

import logging
from typing import List, Optional

import dns.asyncresolver
import dns.exception
import dns.resolver

from email_dns_checker.models.mx_query import (
    MXAnswer,
    MXQueryOutcome,
    MXRecord,
    ProtocolFailure,
    UnexpectedFailure,
)


logger = logging.getLogger(__name__)

# Response cache shared by every resolver this module builds
RESPONSE_CACHE = dns.resolver.LRUCache()


def categorize_failure(exception: Exception) -> str:
    """Categorize DNS failure into specific failure type.

    Args:
        exception: The DNS exception that occurred.

    Returns:
        str: One of: timeout, nxdomain, no_nameservers,
             no_resolver_configuration, dns_error.
    """
    if isinstance(exception, dns.exception.Timeout):
        return "timeout"
    elif isinstance(exception, dns.resolver.NXDOMAIN):
        return "nxdomain"
    elif isinstance(exception, dns.resolver.NoNameservers):
        return "no_nameservers"
    elif isinstance(exception, dns.resolver.NoResolverConfiguration):
        return "no_resolver_configuration"
    else:
        return "dns_error"


def build_resolver(
    timeout: float,
    nameservers: Optional[List[str]] = None,
    use_cache: bool = True,
    port: int = 53,
) -> dns.asyncresolver.Resolver:
    """Build an async resolver for a single query.

    Args:
        timeout: Per-server and total query timeout in seconds.
        nameservers: Explicit nameserver IPs; system resolver config if empty.
        use_cache: Attach the shared response cache.
        port: Nameserver port.

    Returns:
        dns.asyncresolver.Resolver: Configured resolver.
    """
    # System resolver config is only read when no nameservers are given
    resolver = dns.asyncresolver.Resolver(configure=not nameservers)
    # Port must be set before nameservers, which bind it on assignment
    resolver.port = port
    if nameservers:
        resolver.nameservers = list(nameservers)
    resolver.timeout = timeout
    resolver.lifetime = timeout  # Total timeout for query

    if use_cache:
        resolver.cache = RESPONSE_CACHE

    return resolver


async def query_mx(
    domain: str,
    timeout: float = 5,
    nameservers: Optional[List[str]] = None,
    use_cache: bool = True,
    tcp_only: bool = True,
    port: int = 53,
) -> MXQueryOutcome:
    """Query MX records for a domain.

    Never raises: resolver errors are returned as ProtocolFailure and
    anything else as UnexpectedFailure.

    Args:
        domain: Domain to query.
        timeout: Query timeout in seconds.
        nameservers: Explicit nameserver IPs; system resolver config if empty.
        use_cache: Use the shared response cache.
        tcp_only: Send the query over TCP instead of UDP.
        port: Nameserver port.

    Returns:
        MXQueryOutcome: MXAnswer, ProtocolFailure or UnexpectedFailure.
    """
    logger.debug(
        "Querying MX records",
        extra={"domain": domain, "timeout": timeout, "tcp": tcp_only},
    )

    try:
        resolver = build_resolver(timeout, nameservers, use_cache, port)
        answers = await resolver.resolve(
            domain, "MX", tcp=tcp_only, raise_on_no_answer=False
        )
        records = tuple(
            MXRecord(
                preference=int(rdata.preference),
                exchange=rdata.exchange.to_text(),
            )
            for rdata in answers
        )
        return MXAnswer(records=records)

    except dns.exception.DNSException as e:
        failure_type = categorize_failure(e)
        logger.warning(
            "MX query failed",
            extra={"domain": domain, "failure_type": failure_type, "error": str(e)},
        )
        return ProtocolFailure(message=str(e), failure_type=failure_type)

    except Exception as e:
        logger.error(f"Unexpected error querying MX records for {domain}: {e}")
        return UnexpectedFailure(message=str(e))
