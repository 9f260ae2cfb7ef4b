"""Preflight validation for the compilation engine.

``py2sass check`` runs these checks before any stylesheet is compiled so a
missing engine fails fast with an install hint instead of an ImportError in
the middle of a build.
"""

import importlib.util
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ToolCheck:
    """Result of checking a single dependency.

    Attributes:
        name: Dependency name
        available: Whether it is importable and working
        version: Version if available
        required: Whether builds need it
        path: Module location if available
        message: Human-readable context
    """

    name: str
    available: bool
    version: str | None = None
    required: bool = True
    path: str | None = None
    message: str = ""


@dataclass
class PreflightResult:
    """Aggregated preflight results."""

    success: bool = True
    checks: list[ToolCheck] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_check(self, check: ToolCheck) -> None:
        """Record a check, updating success and error/warning lists."""
        self.checks.append(check)

        if check.available:
            return
        if check.required:
            self.success = False
            self.errors.append(f"Required dependency not found: {check.name}")
        else:
            self.warnings.append(f"Optional dependency not found: {check.name}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "success": self.success,
            "checks": [
                {
                    "name": c.name,
                    "available": c.available,
                    "version": c.version,
                    "required": c.required,
                    "path": c.path,
                    "message": c.message,
                }
                for c in self.checks
            ],
            "errors": self.errors,
            "warnings": self.warnings,
        }


class PreflightChecker:
    """Checks that the Sass compilation engine is usable.

    Usage:
        result = PreflightChecker().check_all()
        if not result.success:
            raise typer.Exit(1)
    """

    def check_libsass(self, required: bool = True) -> ToolCheck:
        """Check that libsass is installed and compiles a trivial rule.

        Args:
            required: Whether the engine is required

        Returns:
            ToolCheck result
        """
        spec = importlib.util.find_spec("sass")
        if spec is None:
            return ToolCheck(
                name="libsass",
                available=False,
                required=required,
                message="Install with: pip install libsass",
            )

        from py2sass.compiler import LibSassEngine

        engine = LibSassEngine()
        if not engine.check_available():
            return ToolCheck(
                name="libsass",
                available=False,
                required=required,
                path=spec.origin,
                message="libsass is installed but failed to compile a test rule",
            )

        return ToolCheck(
            name="libsass",
            available=True,
            version=engine.version,
            required=required,
            path=spec.origin,
            message="Sass compilation engine",
        )

    def check_all(self) -> PreflightResult:
        """Run all preflight checks."""
        result = PreflightResult()
        result.add_check(self.check_libsass())
        return result
