"""Structured output: lines of target text with an indentation depth."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field


@dataclass(frozen=True)
class Line:
    text: str
    depth: int = 0

    def render(self, indent_width: int = 2) -> str:
        if not self.text:
            return ""
        return " " * (self.depth * indent_width) + self.text


@dataclass
class Fragment:
    lines: list[Line] = field(default_factory=list)

    @classmethod
    def of(cls, text: str) -> 'Fragment':
        return cls([Line(text)])

    def __len__(self):
        return len(self.lines)

    @property
    def is_inline(self) -> bool:
        return len(self.lines) == 1

    def add(self, text: str, depth: int = 0):
        self.lines.append(Line(text, depth))

    def blank(self):
        self.lines.append(Line(""))

    def nest(self, other: 'Fragment', depth: int = 1):
        """Append ``other`` shifted ``depth`` levels deeper."""
        for line in other.lines:
            self.lines.append(Line(line.text, line.depth + depth))

    def prefix_first(self, prefix: str) -> 'Fragment':
        first, *rest = self.lines
        return Fragment([Line(prefix + first.text, first.depth), *rest])

    def render(self, indent_width: int = 2) -> str:
        return "\n".join(line.render(indent_width) for line in self.lines)

    def __str__(self):
        return self.render()
