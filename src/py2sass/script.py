"""Loading stylesheet build scripts for ``py2sass build``.

A build script is a plain Python file that defines ``stylesheet`` either as
a body function or as a ready Renderer:

    def stylesheet(r):
        r.s(".container", lambda r: r.width("100%"))
"""

import importlib.util
import logging
import sys
from pathlib import Path

from py2sass.exceptions import ScriptLoadError
from py2sass.renderer import Renderer, stylesheet

logger = logging.getLogger(__name__)

ENTRY_NAME = "stylesheet"


def load_stylesheet(path: Path, entry: str = ENTRY_NAME) -> Renderer:
    """Import a build script and return its Renderer.

    Args:
        path: Path to the Python build script
        entry: Name of the module attribute to use

    Returns:
        Renderer built from the script (not yet finalized)

    Raises:
        ScriptLoadError: If the script can't be imported or doesn't define
            a usable entry
    """
    if not path.is_file():
        raise ScriptLoadError(str(path), "file not found")

    spec = importlib.util.spec_from_file_location(f"py2sass_script_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ScriptLoadError(str(path), "not an importable Python file")

    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(spec.name, None)
        raise ScriptLoadError(str(path), f"{type(e).__name__}: {e}") from e

    target = getattr(module, entry, None)
    if isinstance(target, Renderer):
        logger.debug("Using Renderer %s from %s", entry, path)
        return target
    if target is stylesheet:
        raise ScriptLoadError(str(path), f"'{entry}' is the imported decorator, not a stylesheet")
    if callable(target):
        logger.debug("Using body function %s from %s", entry, path)
        return Renderer(target)

    raise ScriptLoadError(str(path), f"no callable or Renderer named '{entry}'")
