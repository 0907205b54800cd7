"""Tests for drn.cli.utils."""

import pytest

from drn.cli.utils import format_size, sanitize_terminal_output


@pytest.mark.parametrize(
    "size,expected",
    [
        (512, "512 B"),
        (2048, "2 KB"),
        (100 * 1024, "0.1 MB"),
        (5 * 1024 * 1024, "5.0 MB"),
    ],
)
def test_format_size(size, expected):
    assert format_size(size) == expected


def test_sanitize_removes_csi_and_osc():
    text = "\x1b[1mbold\x1b[0m \x1b]0;title\x07done"
    assert sanitize_terminal_output(text) == "bold done"


def test_sanitize_leaves_plain_text():
    assert sanitize_terminal_output("Kinshasa\nline two") == "Kinshasa\nline two"
