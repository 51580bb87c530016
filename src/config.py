"""
Settings for commit-card, read from the environment or a .env file.

The GitHub pair identifies whose push events feed the card; the CARD_*
values set the default theme and the UTC hour day keys are anchored to.
"""

import os
from dotenv import load_dotenv

load_dotenv()

GITHUB_TOKEN = os.getenv("GITHUB_TOKEN")
GITHUB_USERNAME = os.getenv("GITHUB_USERNAME")

CARD_THEME = os.getenv("CARD_THEME", "light")
CARD_ANCHOR_HOUR = int(os.getenv("CARD_ANCHOR_HOUR", "16"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Values shipped in .env.example count as unset
PLACEHOLDERS = {
    "GITHUB_TOKEN": "your_token_here",
    "GITHUB_USERNAME": "your_username_here",
}


def validate_config():
    """Check that the GitHub source for the card is configured."""
    settings = {"GITHUB_TOKEN": GITHUB_TOKEN, "GITHUB_USERNAME": GITHUB_USERNAME}
    missing = [
        name for name, value in settings.items()
        if not value or value == PLACEHOLDERS[name]
    ]

    if missing:
        raise ValueError(
            f"Cannot fetch commit activity, missing: {', '.join(missing)}\n"
            "Set them in the environment or in .env (see .env.example).\n"
            "Create a token at: https://github.com/settings/tokens"
        )
