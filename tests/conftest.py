"""Root-level pytest fixtures for the dbc test suite."""

import logging

import pytest

from dbc.schemas import CLIConfig


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def cli_config():
    """Default CLI configuration (INFO logging, failing check enabled)."""
    return CLIConfig()


@pytest.fixture
def make_cli_config():
    """Factory fixture for CLIConfig with overrides.

    Examples
    --------
    >>> def test_pass_only(make_cli_config):
    ...     config = make_cli_config(pass_only=True)
    """
    def _make(**overrides):
        return CLIConfig(**overrides)

    return _make


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def sample_values():
    """Values used by the formatting tests: an int, a nested record, a string."""
    class AA:
        def __init__(self, value):
            self.value = value

        def __repr__(self):
            return f"AA({self.value!r})"

    class BB:
        def __init__(self, inner):
            self.inner = inner

        def __repr__(self):
            return f"BB({self.inner!r})"

    return {"a": 34, "b": BB(AA(234)), "msg": "My message"}
