# =============================================================
# tokenizer.py
# =============================================================
"""Split a raw message into its header block and body text.

Only the top level is tokenized here; the body is returned untouched with
its original line endings so multipart splitting and raw round trips see
exactly what arrived on the wire.
"""
from __future__ import annotations

import logging
import re
from email import policy
from email.parser import Parser
from typing import Dict, List, Tuple

log = logging.getLogger(__name__)

_FOLD_RE = re.compile(r"\r?\n[ \t]+")


def tokenize_message(raw: str) -> Tuple[Dict[str, List[str]], str]:
    """Return ``(headers, body)`` for *raw*.

    ``headers`` maps each header name, in the case it first appeared, to
    the list of its values in order. Folded continuation lines are joined
    with a single space.
    """
    if raw.startswith("From "):
        # not a header line, and the parser would swallow it as an mbox envelope
        log.debug("leading \"From \" line, treating whole text as body")
        return {}, raw

    msg = Parser(policy=policy.compat32).parsestr(raw, headersonly=True)

    headers: Dict[str, List[str]] = {}
    for name, value in msg.items():
        headers.setdefault(name, []).append(_FOLD_RE.sub(" ", value))

    body = msg.get_payload()
    if not isinstance(body, str):
        body = ""

    if msg.defects:
        log.debug("tokenizer defects: %s", [type(d).__name__ for d in msg.defects])
    log.debug("tokenized %d header(s), %d body chars", len(headers), len(body))
    return headers, body
