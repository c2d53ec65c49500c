"""Generation context: module framing shared by the forms of one buffer."""

from __future__ import annotations

import logging

from haki.errors import CompilerError
from haki.output import Fragment

logger = logging.getLogger(__name__)


class Context:
    """Holds where the compiler is for one source buffer.

    ``begin`` opens the module on the first compiled form and does nothing
    afterwards. ``end`` and ``invoke`` close the module and call the entry
    point; each runs exactly once, in that order, after the last form.
    """

    def __init__(self, namespace: str = "User", entry_function: str = "main"):
        self.namespace = namespace
        self.entry_function = entry_function
        self.started = False
        self.finished = False
        self.invoked = False
        self.output = Fragment()

    def begin(self) -> bool:
        """Open the module once. Returns True if this call opened it."""
        if self.started:
            return False
        self.output.add(f"struct {self.namespace} {{")
        self.started = True
        logger.debug("opened module %s", self.namespace)
        return True

    def emit(self, fragment: Fragment):
        """Add a compiled top-level fragment inside the module body."""
        if not self.started or self.finished:
            raise CompilerError(f"module {self.namespace} is not open")
        self.output.blank()
        self.output.nest(fragment)

    def end(self):
        if self.finished:
            raise CompilerError(f"module {self.namespace} is already closed")
        self.begin()
        self.output.add(f"}} // {self.namespace}")
        self.finished = True

    def invoke(self):
        if not self.finished:
            raise CompilerError("entry point invoked before the module was closed")
        if self.invoked:
            raise CompilerError("entry point already invoked")
        self.output.blank()
        self.output.add(f"{self.namespace}.{self.entry_function}()")
        self.invoked = True

    def render(self, indent_width: int = 2) -> str:
        return self.output.render(indent_width)
