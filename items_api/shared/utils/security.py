"""
Security Utilities

Shared-secret API key verification for admin routes.

API Keys:
=========
Keys are compared with hmac.compare_digest so the comparison time does not
depend on how many leading characters match.

Usage:
======
    from items_api.shared.utils.security import SecurityUtils

    if SecurityUtils.verify_api_key(provided, settings.API_KEY):
        print("Key matches!")

    masked = SecurityUtils.mask_api_key(provided)   # "ite***" for logs
"""

import hmac
from typing import Optional


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Constant-time API key comparison
    - Key masking for log output
    """

    @staticmethod
    def verify_api_key(provided_key: Optional[str], expected_key: str) -> bool:
        """
        Verify an API key against the configured secret.

        Args:
            provided_key: Value from the request header (may be None)
            expected_key: Configured shared secret

        Returns:
            True if the key matches, False otherwise
        """
        if provided_key is None:
            return False
        return hmac.compare_digest(
            provided_key.encode("utf-8"),
            expected_key.encode("utf-8"),
        )

    @staticmethod
    def mask_api_key(api_key: str, visible: int = 3) -> str:
        """Keep only the first few characters of a key for logging."""
        if len(api_key) <= visible:
            return "*" * len(api_key)
        return f"{api_key[:visible]}***"
