"""Top-level package for Composer Quiz.

Provides subpackages:
- composer_quiz.core – immutable data models and query results
- composer_quiz.selection – the composer/work selection engine
- composer_quiz.providers – catalog, daily puzzle and async query runner
- composer_quiz.gui – PySide6 front end
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    import sys
    from pathlib import Path
    
    if not getattr(sys, 'frozen', False):
        pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    else:
        pyproject = Path(getattr(sys, "_MEIPASS", ".")) / "pyproject.toml"
    
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass
    
    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version, PackageNotFoundError
        return pkg_version("composer_quiz")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 Composer Quiz contributors. Licensed under the MIT License"
__all__: list[str] = ["__version__"]
