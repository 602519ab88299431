"""Outcome models for a single MX query.

query_mx() returns exactly one of these variants instead of raising.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class MXRecord:
    """A single mail exchanger from an MX answer.

    Attributes:
        preference: Lower values are preferred.
        exchange: Mail server host name.
    """

    preference: int
    exchange: str


@dataclass(frozen=True)
class MXAnswer:
    """The query completed. An empty ``records`` tuple means no MX records."""

    records: Tuple[MXRecord, ...] = ()

    def has_records(self) -> bool:
        return len(self.records) > 0


@dataclass(frozen=True)
class ProtocolFailure:
    """The resolver reported a DNS-level failure.

    Attributes:
        message: Resolver-supplied error text.
        failure_type: One of: timeout, nxdomain, no_nameservers,
            no_resolver_configuration, dns_error.
    """

    message: str
    failure_type: str


@dataclass(frozen=True)
class UnexpectedFailure:
    """Any other error raised while building the resolver or querying."""

    message: str


MXQueryOutcome = Union[MXAnswer, ProtocolFailure, UnexpectedFailure]
