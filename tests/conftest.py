"""Shared pytest fixtures for py2sass tests.

Fixtures are organized by category:
- Path fixtures: bundled SCSS and script fixtures
- Script fixtures: build scripts written to a temp directory
- Configuration fixtures: config dictionaries
"""

from pathlib import Path
from typing import Any

import pytest

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def variables_scss(fixtures_dir: Path) -> Path:
    """Return the path to a SCSS partial defining color variables."""
    return fixtures_dir / "scss" / "_variables.scss"


# =============================================================================
# Script Fixtures
# =============================================================================


BUTTON_SCRIPT = '''"""Button styles."""


def stylesheet(r):
    def button(r):
        r.display("inline-block")
        r.padding("10px 20px")
        r.background_color("#007bff")

    r.s(".button", button)
'''


@pytest.fixture
def button_script(tmp_path: Path) -> Path:
    """Write a build script that renders a single .button rule."""
    script = tmp_path / "button.py"
    script.write_text(BUTTON_SCRIPT, encoding="utf-8")
    return script


@pytest.fixture
def write_script(tmp_path: Path):
    """Return a helper that writes a build script with the given source."""

    def _write(source: str, name: str = "styles.py") -> Path:
        script = tmp_path / name
        script.write_text(source, encoding="utf-8")
        return script

    return _write


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    """Return a minimal valid configuration."""
    return {
        "compile": {
            "compress": False,
        }
    }


@pytest.fixture
def full_config() -> dict[str, Any]:
    """Return a configuration with every option set."""
    return {
        "output": {
            "path": "build/style.css",
        },
        "compile": {
            "compress": True,
            "include": ["styles/_variables.scss", "$gutter: 8px;"],
            "include_paths": ["styles"],
            "precision": 8,
        },
    }
