# SPDX-FileCopyrightText: 2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""HTML minification with an unminified fallback, plus size statistics."""

from dataclasses import dataclass

import minify_html

from .._util.console import warn

# Whitespace collapsing and comment removal are always on in minify-html.
# Closing tags and the <html>/<head> opening tags are kept for compatibility.
MINIFY_OPTIONS: dict[str, bool] = {
    "minify_css": True,
    "minify_js": True,
    "minify_doctype": True,
    "keep_comments": False,
    "keep_closing_tags": True,
    "keep_html_and_head_opening_tags": True,
    "remove_processing_instructions": True,
}


def minify_markup(html: str) -> str:
    """Minify *html*; on any minifier error warn and return *html* unchanged."""
    try:
        return minify_html.minify(html, **MINIFY_OPTIONS)
    except Exception as e:
        warn(f"HTML minification failed, using original HTML: {e}")
        return html


@dataclass(frozen=True)
class CompressionStats:
    original_size: int
    minified_size: int

    @property
    def reduction_percent(self) -> float:
        """Size reduction in percent, one decimal; 0.0 for an empty original."""
        if self.original_size == 0:
            return 0.0
        saved = self.original_size - self.minified_size
        return round(saved / self.original_size * 100, 1)

    def describe(self) -> str:
        return (
            f"Compression: {self.original_size} bytes → {self.minified_size} bytes "
            f"({self.reduction_percent:.1f}% reduction)"
        )


def compression_stats(original: str, minified: str) -> CompressionStats:
    """Compare the UTF-8 encoded sizes of *original* and *minified*."""
    return CompressionStats(
        original_size=len(original.encode("utf-8")),
        minified_size=len(minified.encode("utf-8")),
    )
