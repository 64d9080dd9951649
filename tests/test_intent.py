import pytest

from quickreply.services.intent import classify_query_intent, is_code_switched
from quickreply.services.normalizer import tokenize


@pytest.mark.parametrize(
    "text, expected",
    [
        ("firewall kaise on kare", True),
        ("mujhe vault ke baare mein batao", True),
        ("pls open settings", True),
        ("thx bro", True),
        ("how do I enable the firewall", False),
        ("what are the system requirements", False),
        ("", False),
    ],
)
def test_is_code_switched(text, expected):
    assert is_code_switched(text, tokenize(text)) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("how do I enable sync", "how_to"),
        ("setup the translator", "how_to"),
        ("vault kaise use kare", "how_to"),
        ("firewall error on startup", "error"),
        ("there is a bug in the sidebar", "error"),
        ("how to fix this crash", "how_to"),
        ("tell me about the browser", "general"),
    ],
)
def test_classify_query_intent(text, expected):
    assert classify_query_intent(tokenize(text)) == expected
