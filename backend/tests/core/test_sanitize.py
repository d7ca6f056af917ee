"""Sanitize Input — verifies the allowed character set and trimming.

Invariants:
    - Letters, digits, whitespace (ECMAScript set) and . , ' - survive
    - Everything else is removed
    - Leading/trailing whitespace is trimmed after removal
"""

import pytest

from geostate.core.sanitize import sanitize_input


def test_strips_disallowed_and_trims():
    result = sanitize_input("  O'Brien St., #5!! ")

    assert result == "O'Brien St., 5"
    assert "#" not in result and "!" not in result


def test_keeps_allowed_punctuation():
    assert sanitize_input("St. John's, Winston-Salem") == "St. John's, Winston-Salem"


def test_keeps_inner_whitespace():
    assert sanitize_input("1600  Pennsylvania\tAve") == "1600  Pennsylvania\tAve"


@pytest.mark.parametrize("raw, expected", [
    ("<script>alert(1)</script>", "scriptalert1script"),
    ("Main St; DROP TABLE geodata;--", "Main St DROP TABLE geodata--"),
    ("café", "caf"),
    ("!!!", ""),
    ("   ", ""),
])
def test_removes_other_characters(raw, expected):
    assert sanitize_input(raw) == expected


def test_trim_happens_after_removal():
    assert sanitize_input("# Main St #") == "Main St"


@pytest.mark.parametrize("codepoint", [0x1C, 0x1D, 0x1E, 0x1F, 0x85])
def test_removes_separators_outside_js_whitespace(codepoint):
    assert sanitize_input(f"Main{chr(codepoint)}St") == "MainSt"


@pytest.mark.parametrize("codepoint", [0xA0, 0x2003, 0x3000, 0xFEFF])
def test_keeps_and_trims_unicode_whitespace(codepoint):
    ws = chr(codepoint)
    assert sanitize_input(f"{ws}Main{ws}St{ws}") == f"Main{ws}St"
