# SPDX-FileCopyrightText: 2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Loading of the website and SEO configuration documents.

Both documents are plain JSON objects.  They are parsed once per run and
exposed as read-only views; :meth:`ConfigDocument.get` walks dotted key
paths and yields ``None`` for anything absent so callers never have to
guard against missing sections.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .._util.fs import read_text_file


def load_config(config_path: Path) -> dict[str, Any]:
    """Parse the JSON object stored at *config_path*.

    Raises ``SystemExit`` with a diagnostic when the file is missing,
    unreadable, not valid JSON, or does not hold a JSON object.
    """
    text = read_text_file(config_path, "config")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SystemExit(f"Error loading config from {config_path}: {e}")
    if not isinstance(data, dict):
        raise SystemExit(
            f"Error loading config from {config_path}: "
            f"expected a JSON object, got {type(data).__name__}"
        )
    return data


@dataclass(frozen=True)
class ConfigDocument:
    """Read-only view over one parsed configuration document."""

    data: dict[str, Any] = field(default_factory=dict)

    def get(self, dotted: str) -> Any:
        """Return the value at *dotted* (``"a.b.c"``) or ``None`` if absent."""
        node: Any = self.data
        for part in dotted.split("."):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
            if node is None:
                return None
        return node


@dataclass(frozen=True)
class SocialLink:
    platform: str
    url: str


@dataclass(frozen=True)
class WebsiteConfig(ConfigDocument):
    """Site owner information (``website_config_default.json``)."""

    @property
    def avatar_url(self) -> Any:
        return self.get("personal_info.avatar_url")

    @property
    def social_links(self) -> list[SocialLink]:
        """Social links in document order; malformed entries are skipped."""
        raw = self.data.get("social_links") or []
        if not isinstance(raw, list):
            return []
        links = []
        for entry in raw:
            if not isinstance(entry, dict):
                continue
            platform = entry.get("platform")
            url = entry.get("url")
            if isinstance(platform, str) and isinstance(url, str):
                links.append(SocialLink(platform=platform, url=url))
        return links


@dataclass(frozen=True)
class SeoConfig(ConfigDocument):
    """Search engine metadata (``seo_config.json``)."""


def load_website_config(config_path: Path) -> WebsiteConfig:
    return WebsiteConfig(data=load_config(config_path))


def load_seo_config(config_path: Path) -> SeoConfig:
    return SeoConfig(data=load_config(config_path))
