"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import pytest

from narrative_graph.config import Settings, get_settings

ALEX_AND_MARIA = 'Alex said, "I am leaving." Maria looked at Alex and smiled. Alex said goodbye to Maria.'


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def alex_and_maria() -> str:
    return ALEX_AND_MARIA


@pytest.fixture
def chapter_documents() -> list[dict]:
    """Three short chapters sharing a cast."""
    return [
        {
            "name": "01.txt",
            "content": (
                '"We ride at dawn", Bram said. Bram said it twice. '
                "Elda whispered to Bram. They rode from Harrowgate."
            ),
        },
        {
            "name": "02.txt",
            "content": (
                "Elda said the road was long. Bram answered Elda without looking up. "
                "They camped near Harrowgate."
            ),
        },
        {
            "name": "03.txt",
            "content": (
                "At Thornwick the gates were shut. Elda shouted to Bram. "
                "Bram and Elda waited in Thornwick."
            ),
        },
    ]
