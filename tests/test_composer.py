import pytest

from conftest import CUSTOM_SCRIPTS, SECURITY_PANEL, TRANSLATOR
from quickreply.config import Config
from quickreply.prompts.answer_templates import CODE_LEAD_IN, NEXT_STEP_HINTS, SUMMARY_HEADING
from quickreply.services.composer import compose_answer, confidence_tag, split_units


def _section(text, label):
    """Return the lines under a bold section label up to the next blank line."""
    lines = text.split("\n")
    start = lines.index(f"**{label}**") + 1
    end = lines.index("", start)
    return lines[start:end]


@pytest.mark.parametrize(
    "response",
    [
        "Short answer.",
        "Hello! How can I help you today?",
        "x" * 160,
    ],
)
def test_short_single_line_passes_through(config, response):
    assert compose_answer("anything", "topic", response, 0.3, config) == response


def test_long_single_line_is_composed(config):
    response = "y" * 161
    text = compose_answer("anything", "topic", response, 0.3, config)
    assert text != response
    assert text.startswith(SUMMARY_HEADING)


@pytest.mark.parametrize("response", ["", "   ", "\n\t", None])
def test_blank_response_returns_none(config, response):
    assert compose_answer("anything", "topic", response, 1.0, config) is None


def test_list_lines_become_step_by_step_guide(config):
    text = compose_answer("how do i set up the firewall", "security panel", SECURITY_PANEL, 0.9, config)
    assert _section(text, "Step-by-Step Guide") == [
        "1. Open Settings and select the Security tab.",
        "2. Switch on the firewall toggle to block unsafe connections.",
        "3. Add trusted sites to the allow list so they are never blocked.",
    ]
    assert "**Confidence: High**" in text
    assert NEXT_STEP_HINTS["how_to"]["en"] in text
    assert text.split("\n")[1] == (
        "The Security Panel is the control center for every protection layer in the browser."
    )


def test_error_questions_get_troubleshooting_label(config):
    text = compose_answer("firewall error aa raha hai", "security panel", SECURITY_PANEL, 0.75, config)
    assert len(_section(text, "Troubleshooting Steps")) == 3
    assert "**Confidence: Medium**" in text
    assert NEXT_STEP_HINTS["error"]["hinglish"] in text


def test_general_questions_get_key_details(config):
    text = compose_answer("tell me about translation", "translator logic", TRANSLATOR, 0.5, config)
    points = _section(text, "Key Details")
    assert len(points) == 4
    assert all(point.startswith("- ") for point in points)
    assert "**Confidence: Low**" in text
    assert NEXT_STEP_HINTS["general"]["en"] in text


def test_point_cap_with_many_list_lines(config):
    response = "Here is everything you can tune in the panel.\n" + "\n".join(
        f"- Option number {n} controls a separate feature" for n in range(1, 8)
    )
    text = compose_answer("show options", "topic", response, 0.9, config)
    points = _section(text, "Key Details")
    assert len(points) == 4
    assert points[0] == "- Option number 1 controls a separate feature"


def test_sentence_points_are_deduplicated(config):
    response = (
        "Sync keeps your bookmarks identical everywhere. "
        "Sync keeps your bookmarks identical everywhere! "
        "Too short. "
        "History and open tabs are never uploaded to any server without your explicit consent."
    )
    text = compose_answer("sync", "sync", response, 0.9, config)
    assert _section(text, "Key Details") == [
        "- Sync keeps your bookmarks identical everywhere.",
        "- History and open tabs are never uploaded to any server without your explicit consent.",
    ]


def test_code_block_kept_intact_and_out_of_key_points(config):
    text = compose_answer("custom scripts", "custom scripts", CUSTOM_SCRIPTS, 1.0, config)
    block = CUSTOM_SCRIPTS[: CUSTOM_SCRIPTS.index("```\n") + 3]

    assert text.count(block) == 1
    assert text.count("```") == 2
    assert text.split("\n")[1] == CODE_LEAD_IN
    points = _section(text, "Key Details")
    assert points == [
        "- Scripts run after the page finishes loading.",
        "- Keep them small so pages stay responsive.",
        "- Each script is sandboxed per tab.",
    ]
    assert text.index("**Key Details**") < text.index(block)


def test_pure_code_block_has_no_key_points(config):
    response = "```py\nprint('hello from a very small script')\n```"
    text = compose_answer("show code", "snippet", response, 0.9, config)
    assert "**Key Details**" not in text
    assert text.count(response) == 1
    assert CODE_LEAD_IN in text


def test_split_units_keeps_fences_whole():
    units = split_units("Intro line. Second line.\n```sh\necho one. echo two.\n```\nAfter it.")
    assert units == ["Intro line.", "Second line.", "```sh\necho one. echo two.\n```", "After it."]


def test_summary_falls_back_to_prefix_without_sentences(config):
    response = "word " * 60
    text = compose_answer("x", "topic", response, 0.9, config)
    summary = text.split("\n")[1]
    assert len(summary) <= 180
    assert summary.startswith("word word")


@pytest.mark.parametrize(
    "score, tag",
    [(1.0, "High"), (0.85, "High"), (0.84, "Medium"), (0.70, "Medium"), (0.69, "Low"), (0.0, "Low")],
)
def test_confidence_tag(config, score, tag):
    assert confidence_tag(score, config) == tag


def test_point_cap_ignores_environment(monkeypatch):
    monkeypatch.setenv("MAX_KEY_POINTS", "10")
    config = Config(_env_file=None)
    response = "Every toggle in the panel is listed below.\n" + "\n".join(
        f"- Toggle number {n} switches a separate feature" for n in range(1, 9)
    )
    text = compose_answer("show toggles", "topic", response, 0.9, config)
    assert len(_section(text, "Key Details")) == 4
