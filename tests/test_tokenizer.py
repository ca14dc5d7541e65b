import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from as2_mime.core.tokenizer import tokenize_message


def test_headers_and_body_are_split():
    headers, body = tokenize_message(
        "Content-Type: text/plain\r\nX-A: 1\r\nx-a: 2\r\n\r\nhello\r\nworld\r\n"
    )
    assert headers == {"Content-Type": ["text/plain"], "X-A": ["1"], "x-a": ["2"]}
    assert body == "hello\r\nworld\r\n"


def test_repeated_header_collects_values():
    headers, _ = tokenize_message("Received: a\r\nReceived: b\r\n\r\n")
    assert headers == {"Received": ["a", "b"]}


def test_folded_header_is_unfolded():
    headers, body = tokenize_message("Subject: first\r\n second\r\n\r\nbody")
    assert headers == {"Subject": ["first second"]}
    assert body == "body"


def test_text_without_headers_is_all_body():
    headers, body = tokenize_message("P1")
    assert headers == {}
    assert body == "P1"


def test_body_blank_lines_are_preserved():
    _, body = tokenize_message("X-A: 1\r\n\r\n\r\nline\r\n\r\n")
    assert body == "\r\nline\r\n\r\n"


def test_leading_from_line_stays_in_body():
    headers, body = tokenize_message("From the team\r\nsecond line\r\n")
    assert headers == {}
    assert body == "From the team\r\nsecond line\r\n"
