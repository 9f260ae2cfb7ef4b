"""py2sass CLI interface.

Commands:
- build: Render a Python stylesheet script to SCSS or CSS
- check: Validate that the compilation engine is available
- init: Write a default configuration file

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log lines
- --version: Show version and exit
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from py2sass import __version__
from py2sass.config import CONFIG_FILENAME, Py2SassConfig, create_default_config, load_config
from py2sass.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="py2sass",
    help="Build SCSS stylesheets from Python and compile them to CSS",
    add_completion=False,
    no_args_is_help=True,
)

_config: Py2SassConfig | None = None
_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"py2sass {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with timestamps"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress info messages (warnings and errors only)"),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option("--ci", help="Enable CI mode with JSON log output"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """py2sass - programmatic SCSS stylesheets."""
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


# =============================================================================
# build command
# =============================================================================


@app.command()
def build(
    script: Annotated[
        Path,
        typer.Argument(
            help="Python file defining `stylesheet(r)`",
            exists=True,
            dir_okay=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (overrides config; default: stdout)"),
    ] = None,
    include: Annotated[
        list[str] | None,
        typer.Option(
            "--include",
            "-i",
            help="SCSS file or literal SCSS to prepend (repeatable, after config includes)",
        ),
    ] = None,
    compress: Annotated[
        bool | None,
        typer.Option(
            "--compress/--expanded",
            help="Output style (overrides config)",
        ),
    ] = None,
    sass_only: Annotated[
        bool,
        typer.Option("--sass", help="Write the generated SCSS without compiling"),
    ] = False,
) -> None:
    """Render a stylesheet script.

    Exit codes:
        0: Stylesheet written
        1: Script, include, or compilation failure
    """
    from py2sass.exceptions import Py2SassError, ScriptLoadError
    from py2sass.script import load_stylesheet

    config = _config or Py2SassConfig()

    try:
        renderer = load_stylesheet(script)
    except ScriptLoadError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    try:
        scss = renderer.to_sass()
    except Exception as e:
        _logger.error(f"Stylesheet script failed: {type(e).__name__}: {e}")
        raise typer.Exit(1)

    if sass_only:
        content = scss
    else:
        from py2sass.compiler import CompilationError, CssRenderer, LibSassEngine

        engine = LibSassEngine(
            include_paths=[str(script.parent.resolve()), *config.compile.include_paths],
            precision=config.compile.precision,
        )
        includes = [*config.compile.include, *(include or [])]
        use_compress = config.compile.compress if compress is None else compress

        try:
            content = CssRenderer(scss, includes, use_compress, engine=engine).render()
        except CompilationError as e:
            _logger.error(f"Compilation failed:\n{e}")
            raise typer.Exit(1)
        except (Py2SassError, OSError) as e:
            _logger.error(f"Failed to resolve includes: {e}")
            raise typer.Exit(1)

    output_path = output or (Path(config.output.path) if config.output.path else None)
    if output_path is None:
        typer.echo(content, nl=False)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    kind = "SCSS" if sass_only else "CSS"
    _logger.structured(
        logging.INFO,
        f"Wrote {kind} to {output_path} ({len(content)} characters)",
        path=str(output_path),
        format=kind.lower(),
        characters=len(content),
    )


# =============================================================================
# check command
# =============================================================================


@app.command()
def check(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """Validate that the Sass compilation engine is available.

    Exit codes:
        0: Engine available
        1: Engine missing or broken
    """
    from py2sass.utils.preflight import PreflightChecker

    result = PreflightChecker().check_all()

    if json_output:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo("\nPreflight Check Results\n")
        for check_result in result.checks:
            status = "OK " if check_result.available else "MISSING"
            version_str = f" ({check_result.version})" if check_result.version else ""
            typer.echo(f"  [{status}] {check_result.name}{version_str}")
            if check_result.message:
                typer.echo(f"     - {check_result.message}")
        typer.echo()

    if not result.success:
        if not json_output:
            typer.echo("Preflight check FAILED")
        raise typer.Exit(1)

    if not json_output:
        typer.echo("All preflight checks passed")


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    directory: Annotated[
        Path,
        typer.Option(
            "--dir",
            "-d",
            help="Directory to write the config file into",
            file_okay=False,
        ),
    ] = Path("."),
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file"),
    ] = False,
) -> None:
    """Write a default py2sass.yaml."""
    config_path = directory / CONFIG_FILENAME

    if config_path.exists() and not force:
        _logger.error(f"Config file already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(1)

    directory.mkdir(parents=True, exist_ok=True)
    config_path.write_text(create_default_config(), encoding="utf-8")
    _logger.info(f"Created {config_path}")
