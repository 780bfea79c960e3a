# SPDX-FileCopyrightText: 2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the end-to-end templating run."""

import contextlib
import io
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from site_test_helpers import write_site

from seohtml.lib.core.config import load_seo_config, load_website_config
from seohtml.lib.core.paths import SitePaths
from seohtml.lib.facade import process_site
from seohtml.lib.seo.placeholders import process_html


def _quiet(func, *args):
    with contextlib.redirect_stdout(io.StringIO()), contextlib.redirect_stderr(io.StringIO()):
        return func(*args)


class ProcessSiteTests(unittest.TestCase):
    def test_overwrites_index_with_minified_output(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            paths = write_site(Path(td))
            original = paths.template.read_text(encoding="utf-8")
            result = _quiet(process_site, paths)

            written = paths.output.read_text(encoding="utf-8")
            self.assertEqual(result.output_path, paths.output)
            self.assertEqual(result.display_path, Path("build/web/index.html"))
            self.assertNotIn("{{", written)
            self.assertIn("someuser", written)
            self.assertLess(len(written), len(original))
            self.assertEqual(result.unreplaced, [])
            self.assertEqual(result.stats.minified_size, len(written.encode("utf-8")))

    def test_minifier_failure_writes_substituted_html_verbatim(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            paths = write_site(Path(td))
            expected = process_html(
                paths.template.read_text(encoding="utf-8"),
                load_website_config(paths.website_config),
                load_seo_config(paths.seo_config),
            )
            with unittest.mock.patch(
                "seohtml.lib.seo.minify.minify_html.minify", side_effect=ValueError("boom")
            ):
                result = _quiet(process_site, paths)

            self.assertEqual(paths.output.read_bytes(), expected.encode("utf-8"))
            self.assertEqual(result.stats.reduction_percent, 0.0)

    def test_crlf_template_is_preserved_on_fallback(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            paths = write_site(Path(td), html=None)
            paths.template.parent.mkdir(parents=True, exist_ok=True)
            paths.template.write_bytes(b"<title>{{META_TITLE}}</title>\r\n")
            with unittest.mock.patch(
                "seohtml.lib.seo.minify.minify_html.minify", side_effect=ValueError("boom")
            ):
                _quiet(process_site, paths)
            self.assertEqual(
                paths.output.read_bytes(),
                "<title>Ana García | Flutter Developer</title>\r\n".encode("utf-8"),
            )

    def test_missing_config_leaves_html_untouched(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            paths = write_site(Path(td), seo=None)
            before = paths.template.read_bytes()
            with self.assertRaises(SystemExit) as ctx:
                _quiet(process_site, paths)
            self.assertIn("seo_config.json", str(ctx.exception.code))
            self.assertEqual(paths.template.read_bytes(), before)

    def test_invalid_website_config_leaves_html_untouched(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            paths = write_site(Path(td), website="{oops")
            before = paths.template.read_bytes()
            with self.assertRaises(SystemExit):
                _quiet(process_site, paths)
            self.assertEqual(paths.template.read_bytes(), before)

    def test_missing_template_exits(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            paths = write_site(Path(td), html=None)
            with self.assertRaises(SystemExit) as ctx:
                _quiet(process_site, paths)
            self.assertIn("Error loading HTML template from", str(ctx.exception.code))
            self.assertFalse(paths.output.exists())

    def test_paths_are_relative_to_root(self) -> None:
        paths = SitePaths(Path("/srv/site"))
        self.assertEqual(paths.website_config, Path("/srv/site/assets/config/website_config_default.json"))
        self.assertEqual(paths.seo_config, Path("/srv/site/assets/config/seo_config.json"))
        self.assertEqual(paths.template, Path("/srv/site/build/web/index.html"))
        self.assertEqual(paths.output, paths.template)
