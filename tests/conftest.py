from __future__ import annotations

import pytest

from errkit.config import set_config


@pytest.fixture(autouse=True)
def _default_config():
    """Every test starts and ends with the default active configuration."""
    set_config(None)
    yield
    set_config(None)
