"""Fixed phrases used when restructuring long canned answers."""

SUMMARY_HEADING = "**Quick Summary**"

CODE_LEAD_IN = "Here is a ready-to-use snippet for this:"

SECTION_LABELS = {
    "how_to": "Step-by-Step Guide",
    "error": "Troubleshooting Steps",
    "general": "Key Details",
}

SEPARATOR = "---"

NEXT_STEP_HINTS = {
    "how_to": {
        "en": "Want me to go through any of these steps in more detail?",
        "hinglish": "Kisi step mein detail chahiye toh batao, main samjha dunga.",
    },
    "error": {
        "en": "If the problem persists, share the exact error message and I will dig deeper.",
        "hinglish": "Agar issue abhi bhi aa raha hai, toh exact error message bhejo, main aur check karunga.",
    },
    "general": {
        "en": "Ask a follow-up question if you want more detail on any point.",
        "hinglish": "Aur detail chahiye toh follow-up question pucho!",
    },
}

CONFIDENCE_LINE = "**Confidence: {tag}** | {hint}"
