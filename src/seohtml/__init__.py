"""seohtml package.

Modules:
- seohtml.cli: CLI entry point package (seohtml)
- seohtml.lib.core: Fixed paths and configuration documents
- seohtml.lib.seo: Placeholder table, substitution and minification
- seohtml.lib.facade: The end-to-end templating run
- seohtml.lib._util: Internal helpers (fs, templates, console, ansi, emoji)
- seohtml.ui_utils: Terminal summary output
"""

__all__ = [
    "cli",
    "lib",
    "ui_utils",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("seohtml")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["project"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
