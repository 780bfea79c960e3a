#!/usr/bin/env python3

import argparse

from .. import __version__
from ..lib.core.paths import HTML_PATH, SEO_CONFIG_PATH, WEBSITE_CONFIG_PATH, SitePaths
from ..lib.facade import process_site
from ..ui_utils.terminal import fail, report_result, step


def format_version_string(version: str) -> str:
    """Format the version for ``--version``, e.g. ``"0.1.0\\nLicense: Apache-2.0"``."""
    return f"{version}\nLicense: Apache-2.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seohtml",
        description="seohtml – inject SEO metadata into the built index.html and minify it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Run from the project root after the web build.\n"
            "\n"
            "Reads:\n"
            f"  {WEBSITE_CONFIG_PATH}\n"
            f"  {SEO_CONFIG_PATH}\n"
            f"  {HTML_PATH}\n"
            "\n"
            f"Overwrites {HTML_PATH} with the processed, minified markup.\n"
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"seohtml {format_version_string(__version__)}"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    build_parser().parse_args(argv)

    step("Processing HTML templates for SEO...")
    try:
        result = process_site(SitePaths.from_cwd())
    except SystemExit as e:
        # Load errors carry their diagnostic as the exit code
        if isinstance(e.code, str):
            fail(e.code)
            raise SystemExit(1) from None
        raise
    except Exception as e:
        fail(f"Error processing HTML: {e}")
        raise SystemExit(1) from None

    report_result(result)


if __name__ == "__main__":
    main()
