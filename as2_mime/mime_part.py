# ============================================================================
# as2_mime/mime_part.py
# ============================================================================
"""
MIME part model for AS2 / S/MIME payloads.

A part owns a header store, an optional opaque body and an ordered set of
child parts. Parts are built from raw wire text or from structured pieces,
serialized back to wire text, and classified from their headers.

Serialization trusts the original bytes: when a raw capture was kept it is
returned verbatim, regardless of later header or body changes. Call
:meth:`MimePart.without_raw` to force reconstruction.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional, Union

from .config_manager import MimeConfiguration, get_default_config
from .constants import CANONICAL_PKCS7_PREFIX, CONTENT_TYPE, EOL, LEGACY_PKCS7_PREFIX
from .core import classifier
from .core.header_store import HeaderInput, HeaderStore
from .core.tokenizer import tokenize_message
from .exceptions import raise_nesting_too_deep

logger = logging.getLogger(__name__)

BodyInput = Union["MimePart", List[Any], tuple, str, bytes, None]


def _fold_legacy_types(headers: HeaderInput) -> HeaderInput:
    """Rewrite ``x-pkcs7-`` media types in content-type values to ``pkcs7-``."""
    if not headers:
        return headers
    items = headers.items() if hasattr(headers, "items") else headers

    folded = []
    for name, value in items:
        if isinstance(name, str) and name.lower() == CONTENT_TYPE:
            value = _replace_legacy(value)
        folded.append((name, value))
    return folded


def _replace_legacy(value: Any) -> Any:
    if isinstance(value, str):
        if LEGACY_PKCS7_PREFIX in value:
            logger.debug(f"Folding legacy media type in content-type: {value}")
        return value.replace(LEGACY_PKCS7_PREFIX, CANONICAL_PKCS7_PREFIX)
    if isinstance(value, (list, tuple)):
        return [_replace_legacy(item) for item in value]
    return value


def _strip_line_break(segment: str) -> str:
    """Strip at most one leading and one trailing line break.

    A child payload may legitimately end in a blank line, so surrounding
    whitespace beyond the delimiter's own line break is kept.
    """
    if segment.startswith("\r\n"):
        segment = segment[2:]
    elif segment.startswith("\n"):
        segment = segment[1:]

    if segment.endswith("\r\n"):
        segment = segment[:-2]
    elif segment.endswith("\n"):
        segment = segment[:-1]
    return segment


class MimePart:
    """A MIME entity: headers, an opaque body and/or nested parts."""

    def __init__(self, headers: HeaderInput = None, body: BodyInput = None,
                 raw_message: Optional[str] = None,
                 config: Optional[MimeConfiguration] = None, depth: int = 0):
        self._config = config or get_default_config()
        self._depth = depth
        self._raw_message = raw_message
        self._body: Optional[str] = None
        self._parts: Dict[int, MimePart] = {}
        self._next_index = 0
        self._headers = HeaderStore(_fold_legacy_types(headers))

        if body is not None:
            self.set_body(body)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_text(cls, raw_message: str, keep_raw: Optional[bool] = None,
                  config: Optional[MimeConfiguration] = None, depth: int = 0) -> "MimePart":
        """Parse a part from raw wire text.

        When *keep_raw* is true (the configured default) the text is kept
        and returned verbatim by :meth:`serialize`.
        """
        config = config or get_default_config()
        if keep_raw is None:
            keep_raw = config.parsing.keep_raw

        headers, body = tokenize_message(raw_message)
        return cls(headers, body, raw_message if keep_raw else None, config=config, depth=depth)

    @classmethod
    def from_bytes(cls, raw_message: bytes, keep_raw: Optional[bool] = None,
                   config: Optional[MimeConfiguration] = None) -> "MimePart":
        """Parse a part from raw wire bytes (decoded byte for byte as latin-1)."""
        return cls.from_text(raw_message.decode("latin-1"), keep_raw=keep_raw, config=config)

    @classmethod
    def from_parts(cls, headers: HeaderInput, body: BodyInput = None,
                   config: Optional[MimeConfiguration] = None) -> "MimePart":
        return cls(headers, body, config=config)

    @classmethod
    def from_http_message(cls, message: Any,
                          config: Optional[MimeConfiguration] = None) -> "MimePart":
        """Build a part from an HTTP request/response object.

        *message* needs a ``headers`` mapping and a ``body`` (or ``content``)
        attribute holding the payload as text or bytes.
        """
        headers = getattr(message, "headers", None) or {}
        body = getattr(message, "body", None)
        if body is None:
            body = getattr(message, "content", None)
        return cls(list(headers.items()), body, config=config)

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------

    @property
    def headers(self) -> HeaderStore:
        return self._headers

    def set_headers(self, headers: HeaderInput) -> "MimePart":
        """Replace every header in place."""
        self._headers.set_all(headers)
        return self

    def with_header(self, name: str, value: Any) -> "MimePart":
        """Return a copy with *name* replaced by *value*; ``self`` is untouched."""
        headers = self._headers.with_header(name, value)

        new = copy.copy(self)
        new._headers = headers
        new._parts = copy.deepcopy(self._parts)
        return new

    def get_header(self, name: str) -> List[str]:
        return self._headers.get(name)

    def get_header_line(self, name: str) -> str:
        return self._headers.get_line(name)

    def get_headers(self) -> Dict[str, List[str]]:
        return self._headers.all_canonical()

    def get_header_lines(self) -> str:
        return self._headers.render_lines(EOL)

    def get_parsed_header(self, name: str, index: Optional[int] = None,
                          param: Union[int, str, None] = None):
        return self._headers.get_parsed(name, index, param)

    # ------------------------------------------------------------------
    # Parts
    # ------------------------------------------------------------------

    @property
    def parts(self) -> List["MimePart"]:
        return list(self._parts.values())

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def config(self) -> MimeConfiguration:
        return self._config

    def get_part(self, num: int) -> Optional["MimePart"]:
        return self._parts.get(num)

    def count_parts(self) -> int:
        return len(self._parts)

    def add_part(self, part: Any) -> "MimePart":
        """Append *part*, parsing it from text unless it already is a part."""
        if not isinstance(part, MimePart):
            if isinstance(part, (bytes, bytearray)):
                part = bytes(part).decode("latin-1")
            part = self._parse_child(str(part))

        self._parts[self._next_index] = part
        self._next_index += 1
        return self

    def remove_part(self, num: int) -> bool:
        """Remove the part stored at *num*; remaining indices are kept as they are."""
        if num in self._parts:
            del self._parts[num]
            return True
        return False

    def _parse_child(self, text: str) -> "MimePart":
        depth = self._depth + 1
        max_depth = self._config.parsing.max_nested_depth
        if depth > max_depth:
            raise_nesting_too_deep(depth, max_depth)
        return type(self).from_text(text, keep_raw=self._config.parsing.keep_raw,
                                    config=self._config, depth=depth)

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    @property
    def body(self) -> Optional[str]:
        """Opaque body as assigned (``None`` for parts built from children)."""
        return self._body

    @property
    def raw_message(self) -> Optional[str]:
        return self._raw_message

    def _boundary(self) -> Optional[str]:
        return self._headers.get_parsed(CONTENT_TYPE, 0, "boundary")

    def set_body(self, body: BodyInput) -> "MimePart":
        """Assign *body*.

        A part is adopted as a child and a list or tuple adopts each item.
        Text is split into children on the content-type boundary when one
        is declared, otherwise it is kept as the opaque body.
        """
        if isinstance(body, MimePart):
            self.add_part(body)
        elif isinstance(body, (list, tuple)):
            for part in body:
                self.add_part(part)
        else:
            if isinstance(body, (bytes, bytearray)):
                body = bytes(body).decode("latin-1")
            text = "" if body is None else str(body)

            boundary = self._boundary()
            if boundary:
                segments = text.split("--" + boundary)
                # preamble before the first delimiter and trailer after the last
                segments = segments[1:-1]
                logger.debug(
                    f"Splitting body on boundary {boundary!r} into {len(segments)} part(s) "
                    f"at depth {self._depth}"
                )
                for segment in segments:
                    self.add_part(_strip_line_break(segment))
            else:
                self._body = text

        return self

    def render_body(self) -> str:
        """Return the body, rebuilt from the children when there are any."""
        if not self._parts:
            return self._body or ""

        boundary = self._boundary()
        if not boundary:
            logger.warning(
                f"Cannot rebuild body of {self.count_parts()} part(s) without a boundary parameter"
            )
            return self._body or ""

        chunks = []
        for part in self._parts.values():
            chunks.append(f"--{boundary}{EOL}")
            chunks.append(f"{part.serialize()}{EOL}")
        chunks.append(f"--{boundary}--{EOL}")
        return "".join(chunks)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def without_raw(self) -> "MimePart":
        """Drop the raw capture so the next :meth:`serialize` rebuilds the text."""
        self._raw_message = None
        return self

    def serialize(self) -> str:
        if self._raw_message:
            return self._raw_message
        return self.get_header_lines() + EOL + self.render_body()

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return (
            f"MimePart(content_type={self.get_header_line(CONTENT_TYPE)!r}, "
            f"parts={self.count_parts()}, raw={self._raw_message is not None})"
        )

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_pkcs7_mime(self) -> bool:
        return classifier.is_pkcs7_mime(self)

    def is_pkcs7_signature(self) -> bool:
        return classifier.is_pkcs7_signature(self)

    def is_encrypted(self) -> bool:
        return classifier.is_encrypted(self)

    def is_compressed(self) -> bool:
        return classifier.is_compressed(self)

    def is_signed(self) -> bool:
        return classifier.is_signed(self)

    def is_report(self) -> bool:
        return classifier.is_report(self)

    def is_binary(self) -> bool:
        return classifier.is_binary(self)

    def is_multipart(self) -> bool:
        return classifier.is_multipart(self)
