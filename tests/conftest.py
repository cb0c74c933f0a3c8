"""
Top-level pytest conftest.py -- shared fixtures.

Provides:
    home     - empty temporary home directory (no ~/.claude yet)
    make_env - factory for an Environment bound to ``home`` with in-memory streams
"""

import io

import pytest

from cc_minimal_statusline.environment import Environment
from cc_minimal_statusline.utils import set_debug


@pytest.fixture
def home(tmp_path):
    """Temporary home directory with no .claude directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def make_env(home):
    """Return a factory building an Environment over ``home``.

    Usage::

        env = make_env(interactive=True, answer="n\\n")
        env.stdout.getvalue()
    """

    def _make(interactive=False, answer=""):
        return Environment(
            home=home,
            stdin=io.StringIO(answer),
            stdout=io.StringIO(),
            interactive=interactive,
        )

    return _make


@pytest.fixture(autouse=True)
def _reset_debug():
    """Debug output is process-global; keep it off between tests."""
    set_debug(False)
    yield
    set_debug(False)
