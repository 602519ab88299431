"""Email address and domain syntax utilities."""

import re
from typing import Optional


# Ordinary label: 1-63 chars, no leading/trailing hyphen, and no reserved
# "??--" prefix (only xn-- may use it).
_LABEL = r"(?![a-z0-9]{2}--)[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?"

# Punycode label: "xn--" plus up to 59 chars, not ending with a hyphen.
_PUNYCODE_LABEL = r"xn--[a-z0-9](?:[a-z0-9-]{0,57}[a-z0-9])?"

_TLD = rf"(?:[a-z]{{2,18}}|{_PUNYCODE_LABEL})"

DOMAIN_REGEX = re.compile(
    rf"(?=.{{1,253}}\Z)(?:(?:{_PUNYCODE_LABEL}|{_LABEL})\.)+{_TLD}",
    re.IGNORECASE | re.ASCII,
)


def is_valid_domain(domain: str) -> bool:
    """Validate domain against the hostname grammar.

    Args:
        domain: Domain part of an email address.

    Returns:
        bool: True if the whole string matches, False otherwise.

    Examples:
        >>> is_valid_domain("example.com")
        True
        >>> is_valid_domain("xn--bcher-kva.de")
        True
        >>> is_valid_domain("-example.com")
        False
        >>> is_valid_domain("localhost")
        False
    """
    return DOMAIN_REGEX.fullmatch(domain) is not None


def extract_domain(email: str) -> Optional[str]:
    """Extract the domain part of an email address.

    The address must contain exactly one '@' with a non-empty local part.
    Addresses with several '@' are rejected rather than truncated.

    Args:
        email: Email address to split.

    Returns:
        Optional[str]: Domain part, or None if the address is malformed.

    Examples:
        >>> extract_domain("user@example.com")
        'example.com'
        >>> extract_domain("user@")
        ''
        >>> extract_domain("a@b@example.com") is None
        True
    """
    if not isinstance(email, str) or not email:
        return None

    if email.count("@") != 1:
        return None

    local_part, domain = email.split("@")
    if not local_part:
        return None

    return domain
