# ============================================================================
# as2_mime/core/header_store.py
# ============================================================================
"""
Ordered, case-insensitive, multi-valued header collection.

The canonical case of a name is whatever was registered first; later
registrations under a differently cased name append to the same value list.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..constants import EOL
from .header_grammar import ParsedHeader, assert_header_name, normalize_header_value, parse_header

HeaderInput = Union[Mapping[str, Any], Iterable[Tuple[str, Any]], None]


class HeaderStore:
    """Header collection backing a :class:`~as2_mime.mime_part.MimePart`."""

    def __init__(self, headers: HeaderInput = None):
        self._names: Dict[str, str] = {}
        self._values: Dict[str, List[str]] = {}
        if headers:
            self.set_all(headers)

    def set_all(self, headers: HeaderInput) -> None:
        """Replace every header with *headers*.

        *headers* is a mapping or an iterable of ``(name, value)`` pairs.
        All entries are validated before the store is touched.
        """
        items = headers.items() if isinstance(headers, Mapping) else (headers or [])

        names: Dict[str, str] = {}
        values: Dict[str, List[str]] = {}
        for name, value in items:
            assert_header_name(name)
            normalized = normalize_header_value(value)
            folded = name.lower()
            if folded in names:
                values[names[folded]].extend(normalized)
            else:
                names[folded] = name
                values[name] = normalized

        self._names = names
        self._values = values

    def with_header(self, name: str, value: Any) -> "HeaderStore":
        """Return a copy where *name* is replaced by *value*; ``self`` is untouched."""
        assert_header_name(name)
        normalized = normalize_header_value(value)
        folded = name.lower()

        new = self.copy()
        if folded in new._names:
            del new._values[new._names[folded]]
        new._names[folded] = name
        new._values[name] = normalized
        return new

    def copy(self) -> "HeaderStore":
        new = HeaderStore()
        new._names = dict(self._names)
        new._values = {name: list(values) for name, values in self._values.items()}
        return new

    def get(self, name: str) -> List[str]:
        canonical = self._names.get(name.lower())
        if canonical is None:
            return []
        return list(self._values[canonical])

    def get_line(self, name: str) -> str:
        return ", ".join(self.get(name))

    def get_parsed(self, name: str, index: Optional[int] = None,
                   param: Union[int, str, None] = None):
        """Parsed view of a header.

        With no *index* the whole parsed list is returned. With an *index*
        the parameter dict at that position (``{}`` when missing) is
        returned, or with a *param* too, that single parameter (``None``
        when missing).
        """
        parsed: List[ParsedHeader] = parse_header(self.get(name))
        if index is None:
            return parsed
        params = parsed[index] if 0 <= index < len(parsed) else {}
        if param is not None:
            return params.get(param)
        return params

    def all_canonical(self) -> Dict[str, List[str]]:
        return {name: list(values) for name, values in self._values.items()}

    def render_lines(self, eol: str = EOL) -> str:
        """Render ``Name: value1, value2`` lines in registration order."""
        return "".join(
            f"{name}: {', '.join(values)}{eol}" for name, values in self._values.items()
        )

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderStore):
            return NotImplemented
        return list(self._values.items()) == list(other._values.items())

    def __repr__(self) -> str:
        return f"HeaderStore({self.all_canonical()!r})"
