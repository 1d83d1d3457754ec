"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator

import pytest
from hypothesis import Verbosity, settings

from cinputs.core import stream
from cinputs.parsers import ParserFactory

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def fake_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], io.StringIO]:
    """Replace the shared stdin handle with an in-memory stream."""

    def _install(text: str) -> io.StringIO:
        buffer = io.StringIO(text)
        monkeypatch.setattr(stream, "_stdin", buffer)
        return buffer

    return _install


@pytest.fixture
def clean_parser_registry() -> Iterator[None]:
    """Restore the default parser registry after a test that registers targets."""
    ParserFactory.clear_registry()
    yield
    ParserFactory.clear_registry()
