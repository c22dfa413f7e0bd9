"""
Shared pytest fixtures.
"""
from io import StringIO

import pytest
from rich.console import Console


@pytest.fixture
def capture_console():
    """Return a Console that captures plain output in a StringIO buffer."""
    buf = StringIO()
    con = Console(file=buf, highlight=False, no_color=True, width=120)
    return con, buf
