# SPDX-FileCopyrightText: 2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""SEO placeholder table and substitution into the HTML entry point.

The built ``index.html`` carries ``{{NAME}}`` markers in its ``<head>``
(meta tags, Open Graph / Twitter cards, the JSON-LD ``Person`` block and
the analytics snippet).  Each marker in :data:`TOKENS` is bound to one
value of the configuration documents and rendered as text, as a
comma-joined list, or as a JSON array for the structured data block.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from .._util.template_utils import find_tokens, marker, replace_tokens
from ..core.config import SeoConfig, WebsiteConfig

TWITTER_PLATFORMS = ("x", "twitter")


def _json(value: Any) -> str:
    # Same shape as a browser's JSON.stringify: compact, UTF-8 kept as-is
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _text(value: Any) -> str:
    """Render a value as text; absent values render empty.

    Booleans and integral floats render as JSON would (``true``, ``1``);
    objects and arrays render as compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return _json(value)
    return str(value)


def _joined(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(_text(v) for v in value)
    return _text(value)


def _json_array(value: Any) -> str:
    if value is None:
        return ""
    return _json(value)


def twitter_handle(website: WebsiteConfig) -> str | None:
    """Handle of the first ``x``/``twitter`` social link, from its URL path's last segment.

    A link without a profile path (``https://x.com/``) yields ``None``.
    """
    for link in website.social_links:
        if link.platform in TWITTER_PLATFORMS:
            handle = urlsplit(link.url).path.rstrip("/").rsplit("/", 1)[-1]
            return handle or None
    return None


@dataclass(frozen=True)
class Token:
    name: str
    resolve: Callable[[WebsiteConfig, SeoConfig], Any]
    render: Callable[[Any], str] = _text


def _seo(path: str) -> Callable[[WebsiteConfig, SeoConfig], Any]:
    return lambda website, seo: seo.get(path)


def _handle(website: WebsiteConfig, seo: SeoConfig) -> Any:
    return twitter_handle(website) or seo.get("twitter.creator")


TOKENS: tuple[Token, ...] = (
    Token("LANG_CODE", _seo("meta_tags.language")),
    Token("META_TITLE", _seo("meta_tags.title")),
    Token("META_DESCRIPTION", _seo("meta_tags.description")),
    Token("META_KEYWORDS", _seo("meta_tags.keywords"), _joined),
    Token("AUTHOR_NAME", _seo("meta_tags.author")),
    # One HTML file serves every language, so the page URL is the base URL
    Token("SITE_URL", _seo("site_info.base_url")),
    Token("BASE_URL", _seo("site_info.base_url")),
    Token("AVATAR_URL", lambda website, seo: website.avatar_url),
    Token("SITE_NAME", _seo("site_info.site_name")),
    Token("LOCALE", _seo("meta_tags.locale")),
    Token("TWITTER_HANDLE", _handle),
    Token("JOB_TITLE", _seo("structured_data.job_title")),
    Token("STRUCTURED_DESCRIPTION", _seo("structured_data.description")),
    Token("SOCIAL_LINKS_JSON", _seo("structured_data.same_as"), _json_array),
    Token("ORGANIZATION", _seo("structured_data.organization")),
    Token("ORGANIZATION_URL", _seo("structured_data.organization_url")),
    Token("SKILLS_JSON", _seo("structured_data.skills"), _json_array),
    Token("EDUCATION", _seo("structured_data.education")),
    Token("CITY", _seo("structured_data.address.locality")),
    Token("COUNTRY", _seo("structured_data.address.country")),
    Token("ANALYTICS_ID", _seo("analytics.google_analytics_id")),
)

TOKEN_NAMES = frozenset(t.name for t in TOKENS)


def token_values(website: WebsiteConfig, seo: SeoConfig) -> dict[str, str]:
    """Rendered value of every token in :data:`TOKENS`, keyed by token name."""
    return {t.name: t.render(t.resolve(website, seo)) for t in TOKENS}


def build_replacements(website: WebsiteConfig, seo: SeoConfig) -> dict[str, str]:
    """Return ``{"{{NAME}}": value}`` for every token in :data:`TOKENS`."""
    return {marker(name): value for name, value in token_values(website, seo).items()}


def process_html(template: str, website: WebsiteConfig, seo: SeoConfig) -> str:
    """Substitute every known SEO marker in *template*; unknown markers stay."""
    return replace_tokens(template, token_values(website, seo))


def unreplaced_tokens(html: str) -> list[str]:
    """Known token names still present in *html*."""
    return [name for name in find_tokens(html) if name in TOKEN_NAMES]
