# ============================================================================
# as2_mime/core/classifier.py
# ============================================================================
"""Payload classification for S/MIME parts.

Every predicate is a read-only function of a part's headers (``is_report``
also looks at its direct children). Comparisons are case-insensitive and
only consider the primary media type unless a parameter is named.
"""

from __future__ import annotations

from typing import Optional

from ..constants import (
    CONTENT_TRANSFER_ENCODING,
    CONTENT_TYPE,
    ENCODING_BINARY,
    MULTIPART_REPORT,
    MULTIPART_SIGNED,
    PKCS7_MIME_TYPES,
    PKCS7_SIGNATURE_TYPES,
    SMIME_TYPE_COMPRESSED,
    SMIME_TYPE_ENCRYPTED,
)


def _lowered(value: Optional[str]) -> str:
    return value.lower() if value else ""


def media_type(part) -> str:
    """Primary content type of *part*, lower-cased (``""`` when absent)."""
    return _lowered(part.get_parsed_header(CONTENT_TYPE, 0, 0))


def smime_type(part) -> str:
    return _lowered(part.get_parsed_header(CONTENT_TYPE, 0, "smime-type"))


def is_pkcs7_mime(part) -> bool:
    return media_type(part) in PKCS7_MIME_TYPES


def is_pkcs7_signature(part) -> bool:
    return media_type(part) in PKCS7_SIGNATURE_TYPES


def is_encrypted(part) -> bool:
    return smime_type(part) == SMIME_TYPE_ENCRYPTED


def is_compressed(part) -> bool:
    return smime_type(part) == SMIME_TYPE_COMPRESSED


def is_signed(part) -> bool:
    return media_type(part) == MULTIPART_SIGNED


def is_report(part) -> bool:
    """True for ``multipart/report``, or a signed part with a report child.

    Children are checked with this same predicate, so a signed wrapper
    around another signed report also counts.
    """
    if media_type(part) == MULTIPART_REPORT:
        return True
    if is_signed(part):
        return any(is_report(child) for child in part.parts)
    return False


def is_binary(part) -> bool:
    encoding = part.get_parsed_header(CONTENT_TRANSFER_ENCODING, 0, 0)
    return _lowered(encoding) == ENCODING_BINARY


def is_multipart(part) -> bool:
    # a single child under a declared boundary does not count
    return part.count_parts() > 1
