import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from quickreply.config import Config
from quickreply.engine import LocalAnswerEngine

SECURITY_PANEL = (
    "The Security Panel is the control center for every protection layer in the browser. "
    "It groups the firewall, site lock and tracker blocking in one place.\n"
    "- Open Settings and select the Security tab.\n"
    "- Switch on the firewall toggle to block unsafe connections.\n"
    "- Add trusted sites to the allow list so they are never blocked.\n"
)

CUSTOM_SCRIPTS = (
    "```js\n// inject a banner\n- not a bullet\ndocument.body.prepend(banner);\n```\n"
    "Scripts run after the page finishes loading. Keep them small so pages stay responsive. "
    "Each script is sandboxed per tab."
)

TRANSLATOR = (
    "The translator combines an offline dictionary with a cloud pipeline. "
    "Short phrases are resolved locally so they work without a connection. "
    "Longer passages are sent to the configured provider for a full translation. "
    "Results are cached per page so switching tabs does not translate twice. "
    "You can pin a target language in the settings panel. "
    "The translator never sends page content when private mode is on."
)

HELLO_VARIANTS = [
    "Hello! How can I help you today?",
    "Hi there, ready when you are.",
    "Greetings. Ready for commands.",
]

SYSTEM_REQUIREMENTS = (
    "Runs on Windows 10 or later, macOS 12 or later and most modern Linux distributions."
)

RESPONSES = {
    "hello": HELLO_VARIANTS,
    "thanks": "You're very welcome!",
    "security panel": [SECURITY_PANEL],
    "system requirements": [SYSTEM_REQUIREMENTS],
    "custom scripts": [CUSTOM_SCRIPTS],
    "translator logic": [TRANSLATOR],
}

KEYWORDS = {
    "firewall": "security panel",
    "antivirus": "security panel",
    "specs": "system requirements",
    "translate": "translator logic",
    "ghost": "missing topic",
}


@pytest.fixture
def config():
    return Config(_env_file=None)


@pytest.fixture
def engine(config):
    return LocalAnswerEngine(RESPONSES, KEYWORDS, rng=random.Random(7), config=config)
