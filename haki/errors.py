"""Exceptions raised by the haki pipeline."""

from __future__ import annotations


class HakiError(Exception):
    """Base exception for haki compilation errors.

    ``form`` is filled in by the driver with an excerpt of the top-level
    form that was being compiled when the error happened.
    """

    form: str | None = None

    def __str__(self):
        msg = super().__str__()
        if self.form:
            return f"{msg} (in form: {self.form})"
        return msg


# ---------------------------------------------------------------------------
# Reader
# ---------------------------------------------------------------------------

class ReaderError(HakiError):
    pass


class IncompleteForm(ReaderError):
    """Raised when the buffer ends with unbalanced parentheses."""

    def __init__(self, starting_at: str):
        self.starting_at = starting_at
        super().__init__(f"incomplete form starting at: {starting_at}")


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class ParseError(HakiError):
    pass


class UnknownToken(ParseError):
    """Raised when a token cannot start an expression (e.g. a stray ``)``)."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"unknown token: {token}")


class UnexpectedEnd(ParseError):
    pass


# ---------------------------------------------------------------------------
# Compiler
# ---------------------------------------------------------------------------

class CompilerError(HakiError):
    pass
