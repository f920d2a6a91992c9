"""Shared test fixtures."""

import pytest
from fsml.config import Config, NavConfig, ServerConfig


@pytest.fixture
def sample_paths() -> list[str]:
    """Project paths covering numbered, unnumbered, hidden and index entries."""
    return [
        "mrmd.md",
        "01-intro.md",
        "02-getting-started/index.md",
        "02-getting-started/01-install.md",
        "02-getting-started/02-config.md",
        "03-tutorials/01-basic.md",
        "_assets/image.png",
        ".git/config",
        "appendix.md",
    ]


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration with default navigation conventions."""
    return Config(
        navigation=NavConfig(),
        server=ServerConfig(),
    )
