# SPDX-FileCopyrightText: 2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Fixed input and output locations, resolved against a project root."""

from dataclasses import dataclass
from pathlib import Path

WEBSITE_CONFIG_PATH = Path("assets/config/website_config_default.json")
SEO_CONFIG_PATH = Path("assets/config/seo_config.json")

HTML_PATH = Path("build/web/index.html")
# Language switching happens client-side on a single URL, so only one HTML
# file (default language meta tags) is generated and it replaces the input.
OUTPUT_PATH = Path("build/web/index.html")


@dataclass(frozen=True)
class SitePaths:
    """The three fixed paths bound to a project *root*."""

    root: Path

    @classmethod
    def from_cwd(cls) -> "SitePaths":
        return cls(Path.cwd())

    @property
    def website_config(self) -> Path:
        return self.root / WEBSITE_CONFIG_PATH

    @property
    def seo_config(self) -> Path:
        return self.root / SEO_CONFIG_PATH

    @property
    def template(self) -> Path:
        return self.root / HTML_PATH

    @property
    def output(self) -> Path:
        return self.root / OUTPUT_PATH
