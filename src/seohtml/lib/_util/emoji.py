# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Emoji display-width utilities for consistent console alignment.

Terminals disagree on the width of VS16-dependent emojis (a 1-cell text
symbol followed by U+FE0F, e.g. the warning sign or the clamp).  Rich's
``cell_len`` follows Unicode and reports 2 cells for them, while
most terminals draw 1 cell, so progress lines drift by a column.

All status emojis used by seohtml are natively wide
(``East_Asian_Width=W``) and therefore measure 2 cells everywhere.
``draw_emoji`` pads anything narrower so the message text after the
prefix always starts in the same column.  The emoji set lives in
``seohtml.lib._util.console.STATUS_EMOJI``.
"""

from rich.cells import cell_len


def draw_emoji(emoji: str, width: int = 2) -> str:
    """Pad emojis to a consistent cell width for line alignment."""
    if not emoji:
        return ""
    try:
        emoji_width = cell_len(emoji)
    except (TypeError, ValueError):
        return emoji
    if emoji_width >= width:
        return emoji
    return f"{emoji}{' ' * (width - emoji_width)}"
