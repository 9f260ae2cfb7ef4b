"""py2sass configuration.

Configuration is YAML-based; CLI flags override it per run.
Supports environment variable substitution (${VAR}) in config values.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.py2sass/config.yaml
3. ./py2sass.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "py2sass.yaml"
CONFIG_DIR = ".py2sass"

_ENV_VAR = re.compile(r"\$\{([^}]+)\}")


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        path: Default output file for ``py2sass build`` (None writes to stdout)
    """

    path: str | None = None


@dataclass
class CompileConfig:
    """Compilation settings.

    Attributes:
        compress: Use compressed output style
        include: Include items (file paths or literal SCSS) prepended to every build
        include_paths: Directories searched by ``@import``
        precision: Decimal precision of numbers in the output
    """

    compress: bool = False
    include: list[str] = field(default_factory=list)
    include_paths: list[str] = field(default_factory=list)
    precision: int = 5

    def __post_init__(self) -> None:
        if not isinstance(self.include, list):
            raise ValueError(f"compile.include must be a list (got {type(self.include).__name__})")
        if not isinstance(self.include_paths, list):
            raise ValueError(
                f"compile.include_paths must be a list (got {type(self.include_paths).__name__})"
            )
        if self.precision < 0:
            raise ValueError(f"compile.precision must be >= 0 (got {self.precision})")


@dataclass
class Py2SassConfig:
    """Top-level configuration.

    Attributes:
        output: Output settings
        compile: Compilation settings
    """

    output: OutputConfig = field(default_factory=OutputConfig)
    compile: CompileConfig = field(default_factory=CompileConfig)

    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Path of the config file that was loaded, if any."""
        return self._config_path


def substitute_env_vars(value: Any) -> Any:
    """Substitute ``${VAR}`` references with environment values.

    Recurses into dicts and lists; other values pass through unchanged.

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return _ENV_VAR.sub(replace_var, value)

    if isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    if isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find a configuration file in the standard locations.

    Args:
        start_path: Directory to search (defaults to cwd)

    Returns:
        Path to the config file if found, None otherwise
    """
    start_path = (start_path or Path.cwd()).resolve()

    for candidate in (
        start_path / CONFIG_DIR / "config.yaml",
        start_path / CONFIG_FILENAME,
    ):
        if candidate.exists():
            return candidate

    return None


def load_config_from_dict(data: dict[str, Any]) -> Py2SassConfig:
    """Build a configuration from a parsed YAML mapping.

    Args:
        data: Configuration dictionary

    Returns:
        Py2SassConfig instance
    """
    data = substitute_env_vars(data)
    config = Py2SassConfig()

    output_data = data.get("output") or {}
    if output_data:
        config.output = OutputConfig(path=output_data.get("path", config.output.path))

    compile_data = data.get("compile") or {}
    if compile_data:
        defaults = CompileConfig()
        config.compile = CompileConfig(
            compress=bool(compile_data.get("compress", defaults.compress)),
            include=compile_data.get("include") or [],
            include_paths=compile_data.get("include_paths") or [],
            precision=int(compile_data.get("precision", defaults.precision)),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> Py2SassConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for a config file if none is given

    Returns:
        Py2SassConfig instance (defaults when no file is found)

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path: Path | None = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is None:
        return Py2SassConfig()

    with open(found_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {found_path}")

    config = load_config_from_dict(data)
    config._config_path = found_path
    return config


def create_default_config() -> str:
    """Return default configuration YAML with comments."""
    return """# py2sass configuration

output:
  # File written by `py2sass build` (omit to write to stdout)
  # path: "build/style.css"

compile:
  compress: false        # compressed or expanded output
  include: []            # SCSS files or literal SCSS prepended to every build
  # include:
  #   - "styles/_variables.scss"
  #   - "$brand: ${BRAND_COLOR};"
  include_paths: []      # directories searched by @import
  precision: 5
"""
