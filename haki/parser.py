"""Expression parser: token list to a tree of atoms and lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from haki.errors import UnexpectedEnd, UnknownToken
from haki.lexer import Token, TokenKind, lex
from haki.reader import Reader

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Expression tree
# ---------------------------------------------------------------------------

def quote_string(s: str) -> str:
    # backslash sequences are left for Swift to interpret
    escaped = s.replace("\n", "\\n").replace("\t", "\\t")
    escaped = escaped.replace("\r", "\\r")
    return f'"{escaped}"'


@dataclass(frozen=True)
class Atom:
    token: Token

    def __post_init__(self):
        if not self.token.is_atomic:
            raise ValueError(f"atom cannot wrap {self.token}")

    @property
    def kind(self) -> TokenKind:
        return self.token.kind

    @property
    def is_symbol(self) -> bool:
        return self.token.kind is TokenKind.SYMBOL

    @property
    def value(self) -> str:
        """Literal text of the atom; strings come back quoted."""
        if self.token.kind is TokenKind.STRING:
            return quote_string(self.token.text)
        return self.token.text

    def __str__(self):
        return str(self.token)


@dataclass(frozen=True)
class SList:
    items: tuple

    def __len__(self):
        return len(self.items)

    def __getitem__(self, key):
        return self.items[key]

    def __iter__(self):
        return iter(self.items)

    def __str__(self):
        return "[ " + ", ".join(str(x) for x in self.items) + " ]"


Expression = Union[Atom, SList]


def symbol(name: str) -> Atom:
    return Atom(Token(TokenKind.SYMBOL, name))


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class Parser:
    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def next(self) -> Token:
        if self.at_end():
            raise UnexpectedEnd("unexpected end of input")
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def push_back(self):
        if self.pos > 0:
            self.pos -= 1

    def parse(self) -> Expression:
        token = self.next()
        if token.kind is TokenKind.OPEN_PAREN:
            return self.parse_list()
        if token.is_atomic:
            return Atom(token)
        raise UnknownToken(token)

    def parse_list(self) -> SList:
        items = []
        while not self.at_end():
            token = self.next()
            if token.kind is TokenKind.OPEN_PAREN:
                items.append(self.parse_list())
            elif token.kind is TokenKind.CLOSE_PAREN:
                return SList(tuple(items))
            else:
                self.push_back()
                items.append(self.parse())
        raise UnexpectedEnd("unterminated list")


def parse(tokens: list[Token]) -> Expression:
    """Parse exactly one expression; leftover tokens are an error."""
    parser = Parser(tokens)
    expr = parser.parse()
    if not parser.at_end():
        raise UnknownToken(parser.next())
    return expr


def read_all(text: str) -> list[Expression]:
    """Read, lex and parse every top-level form in ``text``."""
    results = []
    for form in Reader(text):
        results.append(parse(lex(form)))
    logger.debug("parsed %d forms", len(results))
    return results
