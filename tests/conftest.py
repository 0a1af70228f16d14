"""Pytest configuration and shared fixtures for the chatmd test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from chatmd.components import ClickEvent, TextComponent

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def styled_message() -> TextComponent:
    """Provide a chat message mixing styles, a link and a keybind.

    Returns
    -------
    TextComponent
        ``[Server] Press <jump> to read the rules`` with bold, italic and a
        clickable link

    """
    root = TextComponent.empty()
    root.append(TextComponent.literal("[Server] ", bold=True, color="gold"))
    root.append(TextComponent.literal("Press "))
    root.append(TextComponent.keybind("key.jump").styled(italic=True))
    root.append(TextComponent.literal(" to read "))
    root.append(
        TextComponent.literal("the rules", underlined=True).styled(
            click_event=ClickEvent("open_url", "https://example.com/rules")
        )
    )
    return root
