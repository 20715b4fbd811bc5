"""Tests for candidate filtering and colon handling."""

import pytest

from yarncomp.completions.emitter import emit, emit_all


@pytest.mark.parametrize(
    ("candidate", "fragment", "expected"),
    [
        ("abcd", "abc", "abcd"),
        ("a:bcd", "a:b", "bcd"),
        ("build:watch", "build:", "watch"),
        ("a:b:cd", "a:b:", "cd"),
        ("a:b:cd", "a:", "b:cd"),
        ("--json", "", "--json"),
    ],
)
def test_emit(candidate, fragment, expected):
    assert emit(candidate, fragment) == expected


def test_emit_requires_prefix():
    """A candidate not starting with the fragment is never emitted."""
    assert emit("--json", "--h") is None
    assert emit("a:bcd", "b") is None
    assert emit("Major", "maj") is None


def test_emit_all_keeps_order():
    candidates = ["--json", "--home", "--why", "--help"]
    assert list(emit_all(candidates, "--h")) == ["--home", "--help"]


def test_emit_all_skips_empty_candidates():
    assert list(emit_all(["", "x"], "")) == ["x"]
