"""Code generator: expression trees to Swift source text."""

from __future__ import annotations

import logging

from haki.config import CompilerConfig
from haki.context import Context
from haki.errors import CompilerError
from haki.output import Fragment
from haki.parser import Atom, Expression, SList

logger = logging.getLogger(__name__)


class Compiler:
    """Attempts to output sensible Swift from Lisp forms.

    Usage:
        ctx = Context("User")
        Compiler().compile(ctx, parse(lex("(def x 23)")))  # 'static let x = 23'
    """

    def __init__(self, config: CompilerConfig | None = None):
        self.config = config or CompilerConfig()

    @property
    def primitives(self) -> dict[str, str]:
        return self.config.primitives

    def get_primitive(self, name: str) -> str:
        return self.primitives.get(name, name)

    def compile(self, ctx: Context, expr: Expression) -> str:
        """Compile one top-level expression to Swift text."""
        return self.compile_form(ctx, expr).render(self.config.indent_width)

    def compile_form(self, ctx: Context, expr: Expression) -> Fragment:
        ctx.begin()
        if isinstance(expr, Atom):
            return Fragment.of(expr.value)

        if not expr.items:
            raise CompilerError(f"Unable to compile {expr}.")

        head = expr[0]
        if isinstance(head, SList):
            raise CompilerError(f"Can't start an expression with a list (yet). {expr}")

        handler = self._form_handlers.get(head.value) if head.is_symbol else None
        if handler:
            return handler(self, ctx, expr)
        return self.compile_call(ctx, expr)

    def compile_inline(self, ctx: Context, expr: Expression) -> str:
        """Compile an expression that must fit on one line (an argument)."""
        fragment = self.compile_form(ctx, expr)
        if not fragment.is_inline:
            raise CompilerError(f"{expr} cannot be used as a value")
        return fragment.lines[0].text

    # --- Form handlers ---

    def compile_def(self, ctx: Context, expr: SList) -> Fragment:
        """(def name value)"""
        if len(expr) != 3:
            raise CompilerError(f"def takes a name and a value: {expr}")
        name = self.compile_name(expr[1], "def")
        text = self.compile_inline(ctx, expr[2])
        return Fragment.of(f"static let {name} = {text}")

    def compile_defun(self, ctx: Context, expr: SList) -> Fragment:
        """(defun name (params...) body...)"""
        if len(expr) < 3:
            raise CompilerError(f"defun takes a name, a parameter list and a body: {expr}")
        name = self.compile_name(expr[1], "defun")
        params = self.compile_params(expr[2])
        body = [self.compile_form(ctx, x) for x in expr[3:]]

        out = Fragment()
        if name == self.config.entry_point:
            logger.debug("compiling %s as entry point %s", name, self.config.entry_function)
            out.add(f"static func {self.config.entry_function} ({params}) {{")
            for stmt in body:
                out.nest(stmt)
            out.add("}")
            return out

        if not body:
            raise CompilerError(f"defun {name} has an empty body")
        *stmts, last = body
        if not last.is_inline:
            raise CompilerError(f"defun {name} must end with a value, got {expr[-1]}")
        out.add(f"static func {name} ({params}) -> Any {{")
        for stmt in stmts:
            out.nest(stmt)
        out.nest(last.prefix_first("return "))
        out.add("}")
        return out

    def compile_call(self, ctx: Context, expr: SList) -> Fragment:
        """(fn args...)"""
        name = self.get_primitive(expr[0].value)
        args = ", ".join(self.compile_inline(ctx, x) for x in expr[1:])
        return Fragment.of(f"{name}({args})")

    # --- Helpers ---

    def compile_name(self, expr: Expression, form: str) -> str:
        if not isinstance(expr, Atom) or not expr.is_symbol:
            raise CompilerError(f"{form} must be followed by a name, got {expr}")
        return expr.value

    def compile_params(self, expr: Expression) -> str:
        if not isinstance(expr, SList):
            raise CompilerError(f"function params must be a list {expr}")
        params = []
        for param in expr:
            if isinstance(param, SList):
                raise CompilerError(f"param name must NOT be a list {param}")
            if not param.is_symbol:
                raise CompilerError(f"param name must be a symbol {param}")
            params.append(f"_ {param.value}:Any")
        return ", ".join(params)

    # Special form dispatch table
    _form_handlers = {
        'def': compile_def,
        'defun': compile_defun,
    }
