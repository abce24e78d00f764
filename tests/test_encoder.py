"""Tests for the encoder and JSON rendering."""

import json

from vmdl import decode, encode, to_json


# ---------------------------------------------------------------------------
# encode
# ---------------------------------------------------------------------------

def test_encode_nested():
    assert encode({"A": {"B": "1"}}) == "A:\n    B = 1\n"

def test_encode_flat():
    assert encode({"X": "1", "Y": "two"}) == "X = 1\nY = two\n"

def test_encode_empty():
    assert encode({}) == ""

def test_encode_empty_section():
    assert encode({"A": {}}) == "A:\n"

def test_encode_start_indent():
    assert encode({"A": {"B": "1"}}, indent=4) == "    A:\n        B = 1\n"

def test_encode_preserves_order():
    assert encode({"b": "1", "a": "2"}) == "b = 1\na = 2\n"

def test_encode_deep_nesting():
    tree = {"A": {"B": {"C": {"D": "x"}}}}
    assert encode(tree) == "A:\n    B:\n        C:\n            D = x\n"

def test_encode_none_is_leaf():
    assert encode({"A": None}) == "A = None\n"

def test_encode_non_string_leaves():
    assert encode({"n": 3, "flag": True, "items": ["a", "b"]}) == (
        "n = 3\nflag = True\nitems = ['a', 'b']\n"
    )

def test_encode_does_not_mutate():
    tree = {"A": {"B": "1"}, "C": "2"}
    encode(tree)
    assert tree == {"A": {"B": "1"}, "C": "2"}


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------

def test_round_trip_tree():
    tree = {
        "Project": "Demo",
        "Url": "http://x?a=b",
        "Environments": {
            "Staging": {"Route": "/stage", "Replicas": "2"},
            "Empty": {},
        },
        "Owner": "me",
    }
    assert decode(encode(tree)) == tree

def test_round_trip_normalises_indentation():
    text = "A:\n  B = 1\n  C:\n     D = 2\n"
    assert encode(decode(text)) == "A:\n    B = 1\n    C:\n        D = 2\n"

def test_round_trip_drops_comments():
    assert encode(decode("# c\nA = 1\n\n")) == "A = 1\n"


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------

def test_to_json_structure():
    tree = {"A": {"B": "1"}}
    assert json.loads(to_json(tree)) == tree

def test_to_json_indent_and_unicode():
    out = to_json({"名前": "山田"})
    assert out == '{\n  "名前": "山田"\n}'


# ---------------------------------------------------------------------------
# Values the grammar cannot carry
# ---------------------------------------------------------------------------

def test_leaf_ending_in_colon_decodes_as_section():
    assert encode({"Time": "12:"}) == "Time = 12:\n"
    assert decode(encode({"Time": "12:"})) == {"Time = 12": {}}

def test_key_containing_equals_splits_early():
    assert decode(encode({"a=b": "1"})) == {"a": "b = 1"}
