"""Pytest configuration and shared fixtures for the mdlayout test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from mdlayout.builder import LayoutBuilder
from mdlayout.options import LayoutOptions

# Hypothesis profiles, selected with HYPOTHESIS_PROFILE
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def builder() -> LayoutBuilder:
    """Provide a layout builder with default options and style sheet."""
    return LayoutBuilder()


@pytest.fixture
def build():
    """Provide a function building a layout with the given option overrides.

    Examples
    --------
        >>> layout = build([Element("p", [Text("x")])], fit_content=True)

    """

    def _build(nodes, **option_overrides):
        return LayoutBuilder(options=LayoutOptions(**option_overrides)).build(nodes)

    return _build
