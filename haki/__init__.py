"""haki: compiles a small Lisp to Swift source."""

from haki.compiler import Compiler
from haki.config import DEFAULT_PRIMITIVES, ENTRY_POINT, CompilerConfig
from haki.context import Context
from haki.driver import build_program, transpile
from haki.errors import (
    CompilerError,
    HakiError,
    IncompleteForm,
    ParseError,
    ReaderError,
    UnexpectedEnd,
    UnknownToken,
)
from haki.lexer import Token, TokenKind, lex
from haki.parser import Atom, Parser, SList, parse, read_all
from haki.reader import Reader

__all__ = [
    'Compiler', 'CompilerConfig', 'Context',
    'DEFAULT_PRIMITIVES', 'ENTRY_POINT',
    'Reader', 'Token', 'TokenKind', 'lex',
    'Atom', 'SList', 'Parser', 'parse', 'read_all',
    'transpile', 'build_program',
    'HakiError', 'ReaderError', 'IncompleteForm',
    'ParseError', 'UnknownToken', 'UnexpectedEnd', 'CompilerError',
]
