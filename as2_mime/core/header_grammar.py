# ============================================================================
# as2_mime/core/header_grammar.py
# ============================================================================
"""Header name/value grammar checks and parameter parsing.

Names follow the RFC 7230 ``token`` production. Values follow
``field-content`` without ``obs-fold``: visible ASCII, SP, HTAB and
anything from 0x80 up. Raw wire bytes are decoded as latin-1 before they
reach this module, so the 0x80-0xFF ``obs-text`` range maps one to one.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Union

from ..exceptions import EmptyHeaderValueList, InvalidHeaderName, InvalidHeaderValue

HEADER_NAME_RE = re.compile(r"[a-zA-Z0-9'`#$%&*+.^_|~!-]+")
HEADER_VALUE_RE = re.compile(r"[^\x00-\x08\x0a-\x1f\x7f]*")

# Separators outside double quotes
_LIST_SPLIT_RE = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')
_PARAM_SPLIT_RE = re.compile(r';(?=(?:[^"]*"[^"]*")*[^"]*$)')

_OWS = " \t"
_PARAM_TRIM = "\"' \t"

ParsedHeader = Dict[Union[int, str], str]


def assert_header_name(name: Any) -> None:
    if not isinstance(name, str):
        raise InvalidHeaderName(
            f"Header name must be a string but {type(name).__name__} provided",
            {"name_type": type(name).__name__}
        )
    if not HEADER_NAME_RE.fullmatch(name):
        raise InvalidHeaderName(f'"{name}" is not valid header name', {"name": name})


def assert_header_value(value: str) -> None:
    if not HEADER_VALUE_RE.fullmatch(value):
        raise InvalidHeaderValue(f"{value!r} is not valid header value")


def _coerce_scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (int, float)):
        return str(value)
    raise InvalidHeaderValue(
        f"Header value must be scalar or None but {type(value).__name__} provided",
        {"value_type": type(value).__name__}
    )


def normalize_header_value(value: Any) -> List[str]:
    """Return *value* as a list of trimmed, validated header values.

    A list or tuple is treated as a set of values and must not be empty;
    anything else is a single value.
    """
    if isinstance(value, (list, tuple)):
        if len(value) == 0:
            raise EmptyHeaderValueList("Header value can not be an empty list")
        values = list(value)
    else:
        values = [value]

    normalized = []
    for item in values:
        trimmed = _coerce_scalar(item).strip(_OWS)
        assert_header_value(trimmed)
        normalized.append(trimmed)
    return normalized


def parse_header(values: Union[str, Iterable[str]]) -> List[ParsedHeader]:
    """Parse header values into a list of parameter dicts.

    ``multipart/signed; boundary="b1"`` parses to
    ``[{0: "multipart/signed", "boundary": "b1"}]``. Comma separated members
    each produce their own dict; bare tokens take positional integer keys
    and parameter names are lower-cased.
    """
    if isinstance(values, str):
        values = [values]

    parsed: List[ParsedHeader] = []
    for value in values:
        for member in _LIST_SPLIT_RE.split(value):
            params: ParsedHeader = {}
            position = 0
            for chunk in _PARAM_SPLIT_RE.split(member):
                chunk = chunk.strip(_OWS)
                if not chunk:
                    continue
                key, sep, param_value = chunk.partition("=")
                if sep and not chunk.startswith("<"):
                    params[key.strip(_OWS).lower()] = param_value.strip(_PARAM_TRIM)
                else:
                    params[position] = chunk.strip(_PARAM_TRIM)
                    position += 1
            if params:
                parsed.append(params)
    return parsed
