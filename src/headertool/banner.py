"""Three-line comment banner formatting.

A banner looks like this (border shortened here)::

    /*//////////////////////
                               PERFORM UPKEEP
    //////////////////////*/

The border width and text indent are fixed literals; they do not scale with the
text.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO


DEFAULT_TEXT = "PERFORM UPKEEP"
BORDER = "/" * 64
INDENT = " " * 27
OPEN_COMMENT = "/*"
CLOSE_COMMENT = "*/"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Banner:
    """A single banner built from the raw text it was given."""

    raw: str = DEFAULT_TEXT

    @property
    def text(self) -> str:
        """Uppercased banner text."""
        return self.raw.upper()

    def lines(self) -> tuple[str, str, str]:
        """Return the top, middle and bottom lines without line terminators."""
        # The opening line never closes the comment.
        top = OPEN_COMMENT + BORDER
        middle = INDENT + self.text
        bottom = BORDER + CLOSE_COMMENT
        return top, middle, bottom

    def render(self) -> str:
        """Return the three lines, each terminated by a newline."""
        return "".join(f"{line}\n" for line in self.lines())


def choose_text(args: Sequence[str]) -> str:
    """Return the first argument, or ``DEFAULT_TEXT`` when there is none."""
    if not args:
        return DEFAULT_TEXT
    return args[0]


def render_banner(text: str) -> str:
    """Render ``text`` as a newline-terminated three-line banner."""
    return Banner(text).render()


def print_banner(text: str, stream: TextIO | None = None) -> None:
    """Write the banner for ``text`` to ``stream`` (stdout by default)."""
    banner = Banner(text)
    logger.debug("Rendering banner for %r as %r", banner.raw, banner.text)
    out = stream if stream is not None else sys.stdout
    out.write(banner.render())
