"""Wire tag name <-> canonical identifier conversion."""

import pytest

from federation.names import resolve_name, underscore


@pytest.mark.parametrize(
    "term,expected",
    [
        ("simple", "Simple"),
        ("two_words", "TwoWords"),
        ("ns/sub_type", "Ns.SubType"),
        ("status_message", "StatusMessage"),
        ("x1_y2", "X1Y2"),
        ("a__b", "AB"),
        ("ns//sub", "Ns.Sub"),
        ("", ""),
    ],
    ids=[
        "single_word",
        "two_words",
        "namespaced",
        "status_message",
        "digits",
        "consecutive_underscores",
        "consecutive_slashes",
        "empty",
    ],
)
def test_resolve_name(term: str, expected: str) -> None:
    """resolve_name camelizes words and turns / into the namespace separator."""
    assert resolve_name(term) == expected


def test_resolve_name_single_word_capitalizes_only_first_char() -> None:
    """Input without separators only gets its first character upper-cased."""
    assert resolve_name("photo") == "Photo"


def test_resolve_name_is_deterministic() -> None:
    """Same input always yields the same identifier."""
    assert resolve_name("status_message") == resolve_name("status_message")


@pytest.mark.parametrize(
    "identifier,expected",
    [
        ("StatusMessage", "status_message"),
        ("Simple", "simple"),
        ("Ns.SubType", "ns/sub_type"),
        ("HTTPRequest", "http_request"),
    ],
    ids=["camel", "single", "namespaced", "acronym"],
)
def test_underscore(identifier: str, expected: str) -> None:
    """underscore produces the wire tag used by default for entity classes."""
    assert underscore(identifier) == expected


@pytest.mark.parametrize("identifier", ["StatusMessage", "Ns.SubType", "Person"])
def test_underscore_inverts_resolve_name(identifier: str) -> None:
    assert resolve_name(underscore(identifier)) == identifier
