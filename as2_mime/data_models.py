# ============================================================================
# as2_mime/data_models.py
# ============================================================================
"""
Structural summary of a MIME part tree.
Read-only view used for reporting; nothing here decodes payloads.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import CONTENT_TRANSFER_ENCODING, CONTENT_TYPE
from .core import classifier


@dataclass
class PartSummary:
    """Summary of one part and, recursively, its children."""
    content_type: str = ""
    smime_type: Optional[str] = None
    boundary: Optional[str] = None
    transfer_encoding: Optional[str] = None
    is_pkcs7_mime: bool = False
    is_pkcs7_signature: bool = False
    is_signed: bool = False
    is_encrypted: bool = False
    is_compressed: bool = False
    is_report: bool = False
    is_binary: bool = False
    is_multipart: bool = False
    part_count: int = 0
    body_length: int = 0
    has_raw: bool = False
    depth: int = 0
    children: List["PartSummary"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "content_type": self.content_type,
            "smime_type": self.smime_type,
            "boundary": self.boundary,
            "transfer_encoding": self.transfer_encoding,
            "is_pkcs7_mime": self.is_pkcs7_mime,
            "is_pkcs7_signature": self.is_pkcs7_signature,
            "is_signed": self.is_signed,
            "is_encrypted": self.is_encrypted,
            "is_compressed": self.is_compressed,
            "is_report": self.is_report,
            "is_binary": self.is_binary,
            "is_multipart": self.is_multipart,
            "part_count": self.part_count,
            "body_length": self.body_length,
            "has_raw": self.has_raw,
            "depth": self.depth,
            "children": [child.to_dict() for child in self.children]
        }


def summarize_part(part) -> PartSummary:
    """Build a :class:`PartSummary` for *part* and all of its descendants."""
    return PartSummary(
        content_type=classifier.media_type(part),
        smime_type=part.get_parsed_header(CONTENT_TYPE, 0, "smime-type"),
        boundary=part.get_parsed_header(CONTENT_TYPE, 0, "boundary"),
        transfer_encoding=part.get_parsed_header(CONTENT_TRANSFER_ENCODING, 0, 0),
        is_pkcs7_mime=classifier.is_pkcs7_mime(part),
        is_pkcs7_signature=classifier.is_pkcs7_signature(part),
        is_signed=classifier.is_signed(part),
        is_encrypted=classifier.is_encrypted(part),
        is_compressed=classifier.is_compressed(part),
        is_report=classifier.is_report(part),
        is_binary=classifier.is_binary(part),
        is_multipart=classifier.is_multipart(part),
        part_count=part.count_parts(),
        body_length=len(part.body or ""),
        has_raw=part.raw_message is not None,
        depth=part.depth,
        children=[summarize_part(child) for child in part.parts]
    )
