"""Pytest configuration and shared fixtures for the vibedoc test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import os

import pytest
from utils import paragraph, text

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests with generated inputs")
    config.addinivalue_line("markers", "security: Tests for escaping and URL filtering")


@pytest.fixture
def sample_post() -> dict:
    """Provide a stored post document exercising every node variant.

    Returns
    -------
    dict
        Document tree as the editor stores it.

    """
    return {
        "type": "doc",
        "content": [
            {"type": "heading", "attrs": {"level": 1}, "content": [text("Belajar Python")]},
            paragraph(text("Halo "), text("dunia", "bold"), text("!")),
            {
                "type": "bulletList",
                "content": [
                    {"type": "listItem", "content": [paragraph(text("satu"))]},
                    {"type": "listItem", "content": [paragraph(text("dua"))]},
                ],
            },
            {"type": "codeBlock", "attrs": {"language": "python"}, "content": [text("print(1 < 2)")]},
            {"type": "blockquote", "content": [paragraph(text("kutipan"))]},
            paragraph({"type": "image", "attrs": {"src": "/img/a.png", "alt": "Diagram"}}),
            {"type": "horizontalRule"},
            paragraph(text("baris"), {"type": "hardBreak"}, text("baru")),
        ],
    }
