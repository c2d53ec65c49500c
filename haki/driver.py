"""Drives the pipeline over a whole source buffer."""

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path

from haki.compiler import Compiler
from haki.config import CompilerConfig
from haki.context import Context
from haki.errors import HakiError, IncompleteForm
from haki.lexer import lex
from haki.parser import parse
from haki.reader import EXCERPT_LENGTH, Reader

logger = logging.getLogger(__name__)

RUNTIME_PATH = Path(__file__).with_name("core.swift")


def iter_fragments(text: str, config: CompilerConfig, ctx: Context):
    """Yield ``(form, fragment)`` for each top-level form, in source order.

    Stops at the first malformed form; the error carries an excerpt of it.
    """
    compiler = Compiler(config)
    reader = Reader(text)
    while True:
        excerpt = reader.buffer.strip()[:EXCERPT_LENGTH]
        try:
            form = reader.read()
            if form is None:
                return
            fragment = compiler.compile_form(ctx, parse(lex(form)))
        except IncompleteForm:
            # already names where the form starts
            raise
        except HakiError as e:
            e.form = excerpt
            raise
        logger.debug("compiled %r into %d lines", form[:EXCERPT_LENGTH], len(fragment))
        yield form, fragment


def transpile(text: str, config: CompilerConfig | None = None) -> str:
    """Compile a source buffer to the Swift module text.

    Returns the module prologue, one fragment per form, the epilogue and
    the entry point invocation.
    """
    config = config or CompilerConfig()
    ctx = Context(config.namespace, config.entry_function)
    for _, fragment in iter_fragments(text, config, ctx):
        ctx.emit(fragment)
    ctx.end()
    ctx.invoke()
    return ctx.render(config.indent_width) + "\n"


def load_runtime(path: str | Path | None = None) -> str:
    """Read the runtime support source (the bundled one by default)."""
    path = Path(path) if path is not None else RUNTIME_PATH
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def header(now: dt.datetime | None = None) -> str:
    now = now or dt.datetime.now(dt.timezone.utc)
    stamp = now.strftime("%Y-%m-%d %H:%M:%S %z").strip()
    return f"#!/usr/bin/env swift\n// date: {stamp}\n//\n"


def build_program(text: str, config: CompilerConfig | None = None,
                  runtime: str | None = None, now: dt.datetime | None = None) -> str:
    """Compile ``text`` into a complete Swift script.

    ``runtime`` is the runtime support source placed before the module;
    pass an empty string to leave it out.
    """
    module = transpile(text, config)
    if runtime is None:
        runtime = load_runtime()
    parts = [header(now)]
    if runtime:
        parts.append(runtime.rstrip("\n") + "\n")
    parts.append(module)
    return "\n".join(parts)
