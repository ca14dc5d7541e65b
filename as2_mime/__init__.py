# ============================================================================
# as2_mime/__init__.py
# ============================================================================
"""
AS2 MIME part package

Models the MIME entities exchanged in AS2 / S/MIME messages: parsing raw
wire text into a part tree, rebuilding wire text from a tree, and
classifying a part's payload (signed, encrypted, compressed, report, binary).
"""

from .config_manager import MimeConfiguration, get_default_config, get_config_from_env
from .core.header_store import HeaderStore
from .data_models import PartSummary, summarize_part
from .exceptions import (
    ConfigurationError,
    EmptyHeaderValueList,
    HeaderValidationError,
    InvalidHeaderName,
    InvalidHeaderValue,
    MimeError,
    NestingTooDeepError,
)
from .mime_part import MimePart

__version__ = "1.0.0"

__all__ = [
    "MimePart",
    "HeaderStore",
    "PartSummary",
    "summarize_part",
    "MimeConfiguration",
    "get_default_config",
    "get_config_from_env",
    "MimeError",
    "HeaderValidationError",
    "InvalidHeaderName",
    "InvalidHeaderValue",
    "EmptyHeaderValueList",
    "NestingTooDeepError",
    "ConfigurationError",
]
