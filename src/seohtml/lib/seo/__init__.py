"""SEO placeholder substitution and HTML minification."""

from seohtml.lib.seo.minify import CompressionStats, compression_stats, minify_markup
from seohtml.lib.seo.placeholders import (
    TOKENS,
    build_replacements,
    process_html,
    twitter_handle,
)

__all__ = [
    "TOKENS",
    "build_replacements",
    "process_html",
    "twitter_handle",
    "CompressionStats",
    "compression_stats",
    "minify_markup",
]
