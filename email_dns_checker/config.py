"""Configuration module for Email DNS Checker.

Loads and validates environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import List


DEFAULT_DNS_TIMEOUT = 5


@dataclass
class Config:
    """Resolver and logging configuration loaded from environment variables."""

    # DNS Configuration
    dns_timeout: int = DEFAULT_DNS_TIMEOUT
    dns_nameservers: List[str] = field(default_factory=list)
    dns_port: int = 53
    dns_use_cache: bool = True
    dns_tcp_only: bool = True

    # Operational Configuration
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ValueError: If variables are invalid.

        Returns:
            Config: Validated configuration instance.
        """
        dns_timeout_str = os.getenv("DNS_TIMEOUT", str(DEFAULT_DNS_TIMEOUT))
        try:
            dns_timeout = int(dns_timeout_str)
        except ValueError:
            raise ValueError(
                f"DNS_TIMEOUT must be an integer, got {dns_timeout_str!r}"
            ) from None
        if not 1 <= dns_timeout <= 60:
            raise ValueError("DNS_TIMEOUT must be between 1 and 60 seconds")

        dns_nameservers_str = os.getenv("DNS_NAMESERVERS", "")
        dns_nameservers = [
            server.strip() for server in dns_nameservers_str.split(",") if server.strip()
        ]

        dns_port_str = os.getenv("DNS_PORT", "53")
        try:
            dns_port = int(dns_port_str)
        except ValueError:
            raise ValueError(
                f"DNS_PORT must be an integer, got {dns_port_str!r}"
            ) from None
        if not 1 <= dns_port <= 65535:
            raise ValueError("DNS_PORT must be between 1 and 65535")

        return cls(
            dns_timeout=dns_timeout,
            dns_nameservers=dns_nameservers,
            dns_port=dns_port,
            dns_use_cache=cls._get_bool_env("DNS_USE_CACHE", True),
            dns_tcp_only=cls._get_bool_env("DNS_TCP_ONLY", True),
            verbose=cls._get_bool_env("VERBOSE", False),
        )

    @staticmethod
    def _get_bool_env(key: str, default: bool) -> bool:
        """Get boolean environment variable.

        Args:
            key: Environment variable name.
            default: Value used when the variable is not set.

        Returns:
            bool: True for "true", "1" or "yes" (case-insensitive).
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() in ("true", "1", "yes")
