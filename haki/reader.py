"""Form reader: slices a source buffer into top-level parenthesized forms."""

from __future__ import annotations

import logging

from haki.errors import IncompleteForm

logger = logging.getLogger(__name__)

EXCERPT_LENGTH = 30


def split_form(text: str) -> tuple[str, str]:
    """Split ``text`` into its first balanced form and the remainder.

    Parentheses are counted without regard to string literals, so a
    string containing an unbalanced paren will be mis-split.
    """
    opens = 0
    closes = 0
    end = len(text)
    for i, ch in enumerate(text):
        if ch == '(':
            opens += 1
        elif ch == ')':
            closes += 1
        if opens > 0 and opens == closes:
            end = i + 1
            break

    if opens != closes:
        raise IncompleteForm(text[:EXCERPT_LENGTH] + "...")

    return text[:end].strip(), text[end:].strip()


class Reader:
    """Reads one top-level form per call from a mutable buffer.

    Usage:
        reader = Reader("(def x 1) (def y 2)")
        reader.read()  # '(def x 1)'
        reader.read()  # '(def y 2)'
        reader.read()  # None
    """

    def __init__(self, text: str):
        self.buffer = text

    def at_end(self) -> bool:
        return not self.buffer.strip()

    def read(self) -> str | None:
        if self.at_end():
            self.buffer = ""
            return None
        # buffer only changes once the form is known to be complete
        form, remaining = split_form(self.buffer)
        self.buffer = remaining
        logger.debug("read form %r", form[:EXCERPT_LENGTH])
        return form

    def __iter__(self):
        while True:
            form = self.read()
            if form is None:
                return
            yield form


def read_forms(text: str) -> list[str]:
    """Read every top-level form in ``text``."""
    return list(Reader(text))
