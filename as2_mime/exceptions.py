# ============================================================================
# as2_mime/exceptions.py
# ============================================================================
"""
Exceptions raised while building, mutating and parsing MIME parts.
Header errors are raised at the point of assignment; nothing is constructed
or mutated when one is raised.
"""

from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


class MimeError(Exception):
    """Base exception for all MIME part errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        base_msg = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base_msg} (Details: {details_str})"
        return base_msg


class HeaderValidationError(MimeError):
    """Raised when a header name or value is rejected."""
    pass


class InvalidHeaderName(HeaderValidationError):
    """Raised when a header name fails the token grammar."""
    pass


class InvalidHeaderValue(HeaderValidationError):
    """Raised when a header value is non-scalar or contains control characters."""
    pass


class EmptyHeaderValueList(HeaderValidationError):
    """Raised when a header is assigned an empty set of values."""
    pass


class NestingTooDeepError(MimeError):
    """Raised when multipart bodies nest deeper than the configured limit."""
    pass


class ConfigurationError(MimeError):
    """Raised when configuration is invalid."""
    pass


def raise_nesting_too_deep(depth: int, max_depth: int):
    """Raise NestingTooDeepError for a multipart tree that nests too deep."""
    logger.warning(f"Refusing to parse part at depth {depth} (limit {max_depth})")
    raise NestingTooDeepError(
        f"MIME nesting too deep: {depth} exceeds limit of {max_depth}",
        {
            "current_depth": depth,
            "max_depth": max_depth,
            "violation_type": "nesting_depth_limit"
        }
    )
