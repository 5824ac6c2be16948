"""
Pytest plugin exposing the contribution tracker fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["contrib_tracker.testing.conftest"]
"""

from contrib_tracker.testing.fixtures import fake_clock, github_client, stub_provider

__all__ = [
    "stub_provider",
    "fake_clock",
    "github_client",
]
