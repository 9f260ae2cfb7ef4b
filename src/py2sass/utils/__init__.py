"""py2sass utility modules.

- logging: CLI logging with human/verbose/JSON modes
- preflight: compilation engine availability checks
"""

from py2sass.utils.logging import get_logger, setup_logging
from py2sass.utils.preflight import PreflightChecker, PreflightResult

__all__ = [
    "get_logger",
    "setup_logging",
    "PreflightChecker",
    "PreflightResult",
]
