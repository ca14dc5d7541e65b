"""Core header, tokenizing and classification modules."""
from .classifier import (
    is_binary,
    is_compressed,
    is_encrypted,
    is_multipart,
    is_pkcs7_mime,
    is_pkcs7_signature,
    is_report,
    is_signed,
    media_type,
    smime_type,
)
from .header_grammar import assert_header_name, normalize_header_value, parse_header
from .header_store import HeaderStore
from .tokenizer import tokenize_message

__all__ = [
    "HeaderStore",
    "tokenize_message",
    "assert_header_name",
    "normalize_header_value",
    "parse_header",
    "media_type",
    "smime_type",
    "is_pkcs7_mime",
    "is_pkcs7_signature",
    "is_encrypted",
    "is_compressed",
    "is_signed",
    "is_report",
    "is_binary",
    "is_multipart",
]
