"""Tests for the expression parser."""

import pytest

from haki.errors import ParseError, UnexpectedEnd, UnknownToken
from haki.lexer import OPEN_PAREN, Token, TokenKind, lex
from haki.parser import Atom, Parser, SList, parse, read_all, symbol


def p(text):
    return parse(lex(text))


def num(text):
    return Atom(Token(TokenKind.INTEGER, text))


class TestParse:
    def test_atom(self):
        assert p("42") == num("42")

    def test_symbol(self):
        r = p("foo")
        assert isinstance(r, Atom)
        assert r.is_symbol
        assert r.value == "foo"

    def test_list(self):
        assert p("(+ 1 2)") == SList((symbol("+"), num("1"), num("2")))

    def test_nested(self):
        r = p("(define (f x) (* x x))")
        assert isinstance(r, SList)
        assert len(r) == 3
        assert r[1] == SList((symbol("f"), symbol("x")))
        assert r[2] == SList((symbol("*"), symbol("x"), symbol("x")))

    def test_empty_list(self):
        assert p("()") == SList(())

    def test_deeply_nested(self):
        assert p("((()))") == SList((SList((SList(()),)),))

    def test_string_atom(self):
        r = p('(print "hi")')
        assert r[1].kind is TokenKind.STRING
        assert r[1].value == '"hi"'

    def test_double_atom(self):
        assert p("(f 44.5)")[1].kind is TokenKind.DOUBLE

    def test_str(self):
        assert str(p("(f 1)")) == "[ symbol(f), integer(1) ]"


class TestBoundary:
    def test_final_atom_kept(self):
        r = p("(a (b c) d)")
        assert r[-1] == symbol("d")
        assert len(r) == 3

    def test_final_nested_list_kept(self):
        r = p("(a (b c))")
        assert r[1] == SList((symbol("b"), symbol("c")))

    def test_unclosed_list_is_error(self):
        # the last atom of an unclosed list is not silently dropped
        with pytest.raises(UnexpectedEnd):
            p("(a b")

    def test_unclosed_nested_is_error(self):
        with pytest.raises(UnexpectedEnd):
            p("(a (b c)")

    def test_trailing_tokens_are_error(self):
        with pytest.raises(UnknownToken) as exc:
            p("(a) (b)")
        assert exc.value.token == OPEN_PAREN

    def test_atom_then_list_is_error(self):
        with pytest.raises(UnknownToken):
            p("x (def a 1)")

    def test_consumes_whole_form(self):
        parser = Parser(lex("(a (b) c)"))
        parser.parse()
        assert parser.at_end()


class TestErrors:
    def test_stray_close(self):
        with pytest.raises(UnknownToken) as exc:
            p(")")
        assert exc.value.token.kind is TokenKind.CLOSE_PAREN

    def test_no_tokens(self):
        with pytest.raises(UnexpectedEnd):
            parse([])

    def test_quote_marker(self):
        with pytest.raises(UnknownToken):
            parse([OPEN_PAREN, Token(TokenKind.QUOTE), Token(TokenKind.SYMBOL, "x")])

    def test_hierarchy(self):
        assert issubclass(UnknownToken, ParseError)
        assert issubclass(UnexpectedEnd, ParseError)

    def test_atom_rejects_structural(self):
        with pytest.raises(ValueError):
            Atom(OPEN_PAREN)


class TestReadAll:
    def test_forms(self):
        r = read_all("(def x 23)\n(def y 44.5)")
        assert len(r) == 2
        assert r[0][1] == symbol("x")

    def test_empty(self):
        assert read_all("") == []
