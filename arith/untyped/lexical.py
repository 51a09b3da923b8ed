"""Lexical analysis and parsing of untyped arithmetic expressions. See arith/untyped/term.py for the grammar.

Tokens are whitespace-separated words, so "succ(0)" is a single (unknown) token rather than three. Every production
starts with a distinct literal or keyword, so the parser is predictive recursive descent: it looks at the next token,
picks the production and never backtracks. The first error aborts the parse.
"""

from dataclasses import dataclass
import re

from arith.calculus import Parser
from arith.lang.error import ParseError
from arith.untyped.term import FalseTerm, IfElse, IsZero, Pred, Succ, TrueTerm, Zero


@dataclass(frozen=True)
class Token:
    """Word of source text, with its offset into source (used for error messages)."""
    text: str
    start: int

    LITERALS = {"true": TrueTerm, "false": FalseTerm, "0": Zero}
    OPERATORS = {"succ": Succ, "pred": Pred, "iszero": IsZero}
    KEYWORDS = ["if", "then", "else"] + list(OPERATORS)

    @property
    def end(self):
        return self.start + len(self.text)


def tokenize(source):
    """Splits source on ASCII whitespace into Tokens. Raises a ParseError on the first word that is not a literal or
    keyword.
    """
    tokens = []
    for match in re.finditer(r"\S+", source, re.ASCII):
        token = Token(match.group(), match.start())
        if token.text not in Token.LITERALS and token.text not in Token.KEYWORDS:
            raise ParseError("unknown token '{}'", token.text, source, token.start, token.end)
        tokens.append(token)
    return tokens


class TokenStream:
    """Cursor over the tokens of a single source text."""

    def __init__(self, source):
        self.source = source
        self.tokens = tokenize(source)
        self.pos = 0

    def next(self, expected):
        """Consumes and returns the next token. expected describes what the caller is looking for, for the error
        raised if there are no tokens left.
        """
        if self.pos == len(self.tokens):
            end = len(self.source.rstrip())
            raise ParseError(f"unexpected end of token stream, expected {expected}", source=self.source, start=end,
                             end=end, at_end=True)
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def expect(self, keyword):
        """Consumes the next token, which must be keyword."""
        expected = f"'{keyword}'"
        token = self.next(expected)
        if token.text != keyword:
            self.unexpected(token, expected)

    def expect_end(self):
        """Raises a ParseError if any tokens are left."""
        if self.pos != len(self.tokens):
            token = self.tokens[self.pos]
            raise ParseError("expected end of token stream, found '{}'", token.text, self.source, token.start,
                             token.end)

    def unexpected(self, token, expected):
        raise ParseError(f"unexpected token '{{}}', expected {expected}", token.text, self.source, token.start,
                         token.end)


class ArithParser(Parser):
    """Recursive-descent parser for untyped arithmetic expressions."""

    def parse(self, source):
        """Parses source, which must contain exactly one term, into a Term."""
        tokens = TokenStream(source)
        term = self.parse_term(tokens)
        tokens.expect_end()
        return term

    def parse_term(self, tokens):
        """Parses one term from the front of tokens."""
        token = tokens.next("a term")

        if token.text in Token.LITERALS:
            return Token.LITERALS[token.text]()

        elif token.text in Token.OPERATORS:
            return Token.OPERATORS[token.text](self.parse_term(tokens))

        elif token.text == "if":
            condition = self.parse_term(tokens)
            tokens.expect("then")
            true_branch = self.parse_term(tokens)
            tokens.expect("else")
            false_branch = self.parse_term(tokens)
            return IfElse(condition, true_branch, false_branch)

        tokens.unexpected(token, "a term")
