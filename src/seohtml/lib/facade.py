"""Service facade for the HTML templating run.

Provides the single entry point the CLI uses, composing configuration
loading, placeholder substitution, minification and the final write.
"""

from dataclasses import dataclass
from pathlib import Path

from ._util.console import step
from ._util.fs import read_text_file, write_text_file
from .core.config import load_seo_config, load_website_config
from .core.paths import SitePaths
from .seo.minify import CompressionStats, compression_stats, minify_markup
from .seo.placeholders import process_html, unreplaced_tokens


@dataclass(frozen=True)
class ProcessResult:
    output_path: Path
    # Output path as shown to the user, relative to the site root
    display_path: Path
    stats: CompressionStats
    unreplaced: list[str]


def load_template(paths: SitePaths) -> str:
    return read_text_file(paths.template, "HTML template")


def process_site(paths: SitePaths) -> ProcessResult:
    """Fill the SEO placeholders of the built ``index.html`` and minify it in place.

    Everything is read before anything is written, so a load failure
    (``SystemExit``) leaves the output file untouched.
    """
    template = load_template(paths)

    step("Processing default language version...", kind="note")
    website = load_website_config(paths.website_config)
    seo = load_seo_config(paths.seo_config)

    processed = process_html(template, website, seo)

    step("Minifying HTML for performance...", kind="minify")
    minified = minify_markup(processed)
    stats = compression_stats(processed, minified)

    write_text_file(paths.output, minified)
    return ProcessResult(
        output_path=paths.output,
        display_path=paths.output.relative_to(paths.root),
        stats=stats,
        unreplaced=unreplaced_tokens(processed),
    )
