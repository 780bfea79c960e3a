# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Progress and diagnostic lines for the console.

Every line starts with a status emoji padded to two cells.  Progress goes
to stdout, warnings and errors to stderr; colour is applied per stream.
"""

import sys
from typing import TextIO

from .ansi import green, red, supports_color, yellow
from .emoji import draw_emoji

STATUS_EMOJI = {
    "step": "🔧",
    "note": "📝",
    "minify": "📦",
    "done": "✅",
    "stats": "📊",
    "finish": "🎉",
    "warn": "🟡",
    "error": "❌",
}


def _emit(kind: str, message: str, stream: TextIO, paint=None) -> None:
    if paint is not None:
        message = paint(message, supports_color(stream))
    print(f"{draw_emoji(STATUS_EMOJI[kind])} {message}", file=stream)


def step(message: str, kind: str = "step") -> None:
    """Print a progress line to stdout."""
    _emit(kind, message, sys.stdout)


def success(message: str, kind: str = "done") -> None:
    _emit(kind, message, sys.stdout, green)


def warn(message: str) -> None:
    _emit("warn", message, sys.stderr, yellow)


def fail(message: str) -> None:
    _emit("error", message, sys.stderr, red)
