import os
import sys
import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from as2_mime.core.header_store import HeaderStore
from as2_mime.exceptions import EmptyHeaderValueList, InvalidHeaderName, InvalidHeaderValue


def test_same_name_registered_twice_merges_values():
    store = HeaderStore([("X-Trace", "A"), ("x-trace", "B")])
    assert store.get("X-TRACE") == ["A", "B"]
    assert store.all_canonical() == {"X-Trace": ["A", "B"]}


def test_lookup_is_case_insensitive_and_missing_is_empty():
    store = HeaderStore({"Content-Type": "text/plain"})
    assert store.get("content-type") == ["text/plain"]
    assert "CONTENT-TYPE" in store
    assert store.get("X-Missing") == []
    assert store.get_line("X-Missing") == ""


def test_get_line_joins_values():
    store = HeaderStore({"Accept": ["a", "b", "c"]})
    assert store.get_line("accept") == "a, b, c"


def test_set_all_replaces_everything():
    store = HeaderStore({"A": "1", "B": "2"})
    store.set_all({"C": "3"})
    assert "A" not in store
    assert list(store) == ["C"]


def test_set_all_failure_leaves_store_untouched():
    store = HeaderStore({"A": "1"})
    with pytest.raises(InvalidHeaderValue):
        store.set_all({"B": "2", "C": "bad\x01"})
    assert store.all_canonical() == {"A": ["1"]}


@pytest.mark.parametrize("headers,error", [
    ({"Bad Header": "x"}, InvalidHeaderName),
    ({"X-Ctl": "a\x01b"}, InvalidHeaderValue),
    ({"X-Empty": []}, EmptyHeaderValueList),
])
def test_set_all_validation_errors(headers, error):
    with pytest.raises(error):
        HeaderStore(headers)


def test_with_header_returns_new_store():
    store = HeaderStore({"A": "1", "B": "2"})
    updated = store.with_header("a", ["3", "4"])

    assert store.get("A") == ["1"]
    assert list(store) == ["A", "B"]
    assert updated.get("A") == ["3", "4"]
    # the replaced header takes the new casing and moves to the end
    assert list(updated) == ["B", "a"]


def test_with_header_validates():
    store = HeaderStore()
    with pytest.raises(InvalidHeaderName):
        store.with_header("Bad Header", "x")
    with pytest.raises(EmptyHeaderValueList):
        store.with_header("X-Empty", [])


def test_render_lines_in_registration_order():
    store = HeaderStore([("Content-Type", "text/plain"), ("X-Multi", "1"), ("x-multi", "2")])
    assert store.render_lines() == "Content-Type: text/plain\r\nX-Multi: 1, 2\r\n"
    assert HeaderStore().render_lines() == ""


def test_get_parsed():
    store = HeaderStore({"Content-Type": 'multipart/signed; boundary="abc"'})
    assert store.get_parsed("content-type", 0, 0) == "multipart/signed"
    assert store.get_parsed("content-type", 0, "boundary") == "abc"
    assert store.get_parsed("content-type", 0, "missing") is None
    assert store.get_parsed("content-type", 3) == {}
    assert store.get_parsed("x-missing", 0, 0) is None


def test_copy_is_independent():
    store = HeaderStore({"A": "1"})
    clone = store.copy()
    clone.set_all({"B": "2"})
    assert store.get("A") == ["1"]
    assert store == HeaderStore({"A": "1"})
