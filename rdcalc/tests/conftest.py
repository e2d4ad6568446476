"""Shared fixtures: a Rich console that records to a string."""

import io

import pytest
from rich.console import Console


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console(buffer):
    return Console(file=buffer, width=120, color_system=None)
