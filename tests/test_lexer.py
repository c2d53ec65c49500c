"""Tests for the tokenizer."""

import pytest

from haki.lexer import CLOSE_PAREN, OPEN_PAREN, Token, TokenKind, classify, lex, unlex


def sym(text):
    return Token(TokenKind.SYMBOL, text)


def integer(text):
    return Token(TokenKind.INTEGER, text)


def double(text):
    return Token(TokenKind.DOUBLE, text)


def string(text):
    return Token(TokenKind.STRING, text)


def kinds(text):
    return [t.kind for t in lex(text)]


class TestLex:
    def test_call(self):
        assert lex("(+ 1 2.5 foo)") == [
            OPEN_PAREN, sym("+"), integer("1"), double("2.5"), sym("foo"), CLOSE_PAREN,
        ]

    def test_nested(self):
        assert kinds("(a (b))") == [
            TokenKind.OPEN_PAREN, TokenKind.SYMBOL,
            TokenKind.OPEN_PAREN, TokenKind.SYMBOL,
            TokenKind.CLOSE_PAREN, TokenKind.CLOSE_PAREN,
        ]

    def test_whitespace_kinds(self):
        assert lex("(a\tb\r\nc\n d)") == [
            OPEN_PAREN, sym("a"), sym("b"), sym("c"), sym("d"), CLOSE_PAREN,
        ]

    def test_commas_ignored(self):
        assert lex("(f a, b,c)") == [OPEN_PAREN, sym("f"), sym("a"), sym("b"), sym("c"), CLOSE_PAREN]

    def test_word_before_open_paren(self):
        assert lex("(f(g))") == [OPEN_PAREN, sym("f"), OPEN_PAREN, sym("g"), CLOSE_PAREN, CLOSE_PAREN]

    def test_empty(self):
        assert lex("") == []
        assert lex("   ") == []

    def test_consecutive_separators(self):
        assert lex("(a   ,,  b)") == [OPEN_PAREN, sym("a"), sym("b"), CLOSE_PAREN]

    def test_bare_atom(self):
        assert lex("42") == [integer("42")]

    def test_keeps_literal_text(self):
        assert lex("(f 007 1.50)") == [OPEN_PAREN, sym("f"), integer("007"), double("1.50"), CLOSE_PAREN]


class TestStrings:
    def test_string(self):
        assert lex('(print "hello world")') == [
            OPEN_PAREN, sym("print"), string("hello world"), CLOSE_PAREN,
        ]

    def test_parens_and_commas_inside(self):
        assert lex('("(a, b)")') == [OPEN_PAREN, string("(a, b)"), CLOSE_PAREN]

    def test_empty_string(self):
        assert lex('(f "")') == [OPEN_PAREN, sym("f"), string(""), CLOSE_PAREN]

    def test_word_before_quote(self):
        assert lex('(f a"b")') == [OPEN_PAREN, sym("f"), sym("a"), string("b"), CLOSE_PAREN]

    def test_numeric_string_stays_string(self):
        assert lex('"42"') == [string("42")]

    def test_unterminated(self):
        assert lex('(f "abc') == [OPEN_PAREN, sym("f"), string("abc")]


class TestClassify:
    @pytest.mark.parametrize("word", ["0", "23", "-5", "+7", "1000000000000000000000"])
    def test_integer(self, word):
        assert classify(word).kind is TokenKind.INTEGER

    @pytest.mark.parametrize("word", ["44.5", "-0.25", "1e3", "2.5E-4", ".5"])
    def test_double(self, word):
        assert classify(word).kind is TokenKind.DOUBLE

    @pytest.mark.parametrize("word", ["+", "-", "foo", "-main", "1.2.3", "12abc", "nan", "inf", "x1"])
    def test_symbol(self, word):
        assert classify(word).kind is TokenKind.SYMBOL

    def test_never_fails(self):
        assert classify("3..").kind is TokenKind.SYMBOL

    @pytest.mark.parametrize("word", ["1_000", "1_0.5", "\u0663", "\u0661.5", "\uff11"])
    def test_not_swift_literal(self, word):
        assert classify(word).kind is TokenKind.SYMBOL


ROUND_TRIP = [
    "(def x 23)",
    "(def y 44.5)",
    "(defun add (a b) (+ a b x y))",
    "(f -1 +2 1e3 .5 -main foo-bar)",
    "((()))",
    "(a, b, (c 1.0))",
]


@pytest.mark.parametrize("text", ROUND_TRIP)
def test_relex_is_stable(text):
    tokens = lex(text)
    assert lex(unlex(tokens)) == tokens


def test_token_str():
    assert str(sym("x")) == "symbol(x)"
    assert str(OPEN_PAREN) == "open-paren"
