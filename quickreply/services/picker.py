"""Variant selection for topics with several canned responses."""
from __future__ import annotations

import random
from typing import Optional

from ..schemas import CanonicalTopic


def pick_response(topic: CanonicalTopic, rng: Optional[random.Random] = None) -> str:
    if len(topic.responses) == 1:
        return topic.responses[0]
    return (rng or random).choice(topic.responses)
