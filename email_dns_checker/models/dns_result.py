"""Email domain check result models."""

from dataclasses import dataclass
from enum import IntEnum


class ResultCode(IntEnum):
    """Outcome discriminator returned to callers."""

    VALID = 0  # Domain publishes at least one MX record
    INVALID_EMAIL = 1  # Empty, missing '@', or domain fails syntax check
    DOMAIN_NOT_FOUND = 2  # Query completed with no MX records
    DNS_QUERY_FAILED = 3  # Resolver reported a DNS-level failure
    UNEXPECTED_ERROR = 4  # Anything else raised during the query


@dataclass(frozen=True)
class DNSResult:
    """Result of a single email domain check.

    Attributes:
        message: Human-readable outcome description.
        code: Outcome discriminator.
    """

    message: str
    code: ResultCode

    @classmethod
    def valid(cls) -> "DNSResult":
        return cls("Email domain is valid.", ResultCode.VALID)

    @classmethod
    def invalid_email(cls) -> "DNSResult":
        return cls("Invalid email address.", ResultCode.INVALID_EMAIL)

    @classmethod
    def domain_not_found(cls) -> "DNSResult":
        return cls("Email domain does not exist.", ResultCode.DOMAIN_NOT_FOUND)

    @classmethod
    def dns_query_failed(cls, detail: str) -> "DNSResult":
        return cls(f"DNS query failed: {detail}", ResultCode.DNS_QUERY_FAILED)

    @classmethod
    def unexpected_error(cls, detail: str) -> "DNSResult":
        return cls(f"Unexpected error: {detail}", ResultCode.UNEXPECTED_ERROR)

    def is_valid(self) -> bool:
        """Check if the email domain accepts mail.

        Returns:
            bool: True if code is VALID, False otherwise.
        """
        return self.code == ResultCode.VALID
