"""Terminal output helpers.

Core line printers (``step``, ``success``, ``warn``, ``fail``) are defined
in ``seohtml.lib._util.console`` so that service-layer modules can use them
without a cross-layer dependency.  This module re-exports them and adds
the run summary.
"""

from seohtml.lib._util.console import (  # noqa: F401  -- re-exports
    fail,
    step,
    success,
    warn,
)
from seohtml.lib.facade import ProcessResult


def report_result(result: ProcessResult) -> None:
    """Print the output location, the compression line and the final banner."""
    if result.unreplaced:
        warn(f"Placeholders left unreplaced: {', '.join(result.unreplaced)}")
    success(f"HTML processed and minified: {result.display_path}")
    step(result.stats.describe(), kind="stats")
    success("HTML processing completed successfully!", kind="finish")
