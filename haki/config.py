"""Compiler configuration."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace

# Source symbol -> runtime support call name.
DEFAULT_PRIMITIVES = {
    "+": "Core._plus",
}

# The defun with this name becomes the program's side-effecting entry point.
ENTRY_POINT = "-main"
ENTRY_FUNCTION = "main"

DEFAULT_NAMESPACE = "User"


@dataclass
class CompilerConfig:
    namespace: str = DEFAULT_NAMESPACE
    entry_point: str = ENTRY_POINT
    entry_function: str = ENTRY_FUNCTION
    primitives: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PRIMITIVES))
    indent_width: int = 2

    def with_primitives(self, mapping: dict[str, str]) -> 'CompilerConfig':
        """Return a copy whose primitive table also holds ``mapping``."""
        primitives = dict(self.primitives)
        primitives.update(mapping)
        return replace(self, primitives=primitives)


def parse_primitive(spec: str) -> tuple[str, str]:
    """Parse a ``NAME=TARGET`` option value."""
    name, sep, target = spec.partition("=")
    name = name.strip()
    target = target.strip()
    if not sep or not name or not target:
        raise ValueError(f"expected NAME=TARGET, got {spec!r}")
    return name, target
