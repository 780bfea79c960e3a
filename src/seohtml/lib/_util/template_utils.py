# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Minimal template rendering via ``{{VAR}}`` token replacement."""

import re
from collections.abc import Mapping

_TOKEN_RE = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")


def marker(name: str) -> str:
    """Return the ``{{NAME}}`` marker for *name*."""
    return f"{{{{{name}}}}}"


def replace_tokens(content: str, variables: Mapping[str, object]) -> str:
    """Replace ``{{KEY}}`` tokens in *content* with *variables* values.

    Every occurrence of each known marker is replaced; markers whose name is
    not a key of *variables* are left as they are. ``None`` renders as an
    empty string.
    """
    for key, value in variables.items():
        pattern = re.compile(re.escape(marker(key)))
        text = "" if value is None else str(value)
        # Callable replacement: keeps backslashes in values literal
        content = pattern.sub(lambda _m, text=text: text, content)
    return content


def find_tokens(content: str) -> list[str]:
    """Return the names of all ``{{NAME}}`` markers, first appearance first."""
    seen: list[str] = []
    for name in _TOKEN_RE.findall(content):
        if name not in seen:
            seen.append(name)
    return seen
