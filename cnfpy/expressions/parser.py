#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## parser.py
##
"""
    Recursive-descent parser for propositional formulas.

    The grammar is::

        expr := IDENTIFIER
              | NOT expr
              | '(' expr (AND|OR) expr ')'

    Every binary operator is explicitly bracketed, hence there is no operator
    precedence to resolve: `A AND B AND C` is not a formula, `((A AND B) AND C)` is.
    `NOT` binds to the expression that immediately follows it, so `NOT (A OR B)` negates
    the disjunction and `NOT NOT A` is a double negation.

    By default the parser is strict: any deviation from the grammar raises a
    :class:`~cnfpy.exceptions.SyntaxError`, including tokens after a complete formula.
    With `strict=False`, two forms of malformed input are repaired as the original
    command-line tool did: a token in operator position that is not `AND` is read as `OR`,
    and tokens after a complete formula are ignored. Both emit a `SyntaxWarning`.
    A missing operand, a missing closing bracket or an unexpected end of input are
    always errors.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        parse
"""
import logging
import warnings

from .core import Operator
from .variables import BoolVar
from .lexer import TokenType, tokenize
from ..exceptions import SyntaxError

logger = logging.getLogger(__name__)


def parse(tokens, strict=True):
    """
        Parse a formula into an expression tree.

        :param tokens: list of tokens as returned by :func:`~cnfpy.expressions.lexer.tokenize`,
                       or the formula text itself
        :param strict: if False, unknown binary operators are read as `OR` and trailing
                       tokens are ignored (with a warning) instead of raising an error
        :return: the root :class:`~cnfpy.expressions.core.Expression`
        :raises SyntaxError: when the tokens do not form exactly one formula
    """
    if isinstance(tokens, str):
        tokens = tokenize(tokens)
    return Parser(tokens, strict=strict).parse()


class Parser(object):
    """
        Consumes a token list left to right, with a cursor shared between all
        (recursive) calls of `parse_expr()`
    """

    def __init__(self, tokens, strict=True):
        if len(tokens) == 0 or tokens[-1].type != TokenType.END:
            raise ValueError("Token list must end with an END token, use tokenize() to create it")
        self.tokens = tokens
        self.strict = strict
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos]

    def advance(self):
        token = self.tokens[self.pos]
        if token.type != TokenType.END:  # END is never consumed
            self.pos += 1
        return token

    def parse(self):
        try:
            expr = self.parse_expr()
        except RecursionError:
            raise SyntaxError("Formula nested too deeply", self.peek().pos) from None

        trailing = self.peek()
        if trailing.type != TokenType.END:
            if self.strict:
                raise SyntaxError(f"Unexpected {trailing.describe()} after complete formula", trailing.pos)
            warnings.warn(f"Ignoring input after complete formula, starting at position {trailing.pos}",
                          SyntaxWarning)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("parsed %d tokens into an expression of size %d", self.pos, expr.size())
        return expr

    def parse_expr(self):
        token = self.advance()

        if token.type == TokenType.IDENTIFIER:
            return BoolVar(token.value)

        if token.type == TokenType.NOT:
            operand = self.parse_expr()
            return Operator("not", [operand])

        if token.type == TokenType.LPAREN:
            left = self.parse_expr()
            name = self.parse_binop()
            right = self.parse_expr()
            closing = self.advance()
            if closing.type != TokenType.RPAREN:
                raise SyntaxError(f"Expected ')' but got {closing.describe()}", closing.pos)
            return Operator(name, [left, right])

        if token.type == TokenType.END:
            raise SyntaxError("Unexpected end of input, expected an operand", token.pos)
        raise SyntaxError(f"Unexpected {token.describe()}, expected an operand", token.pos)

    def parse_binop(self):
        token = self.advance()
        if token.type == TokenType.AND:
            return "and"
        if token.type == TokenType.OR:
            return "or"

        if token.type == TokenType.END:
            raise SyntaxError("Unexpected end of input, expected 'AND' or 'OR'", token.pos)
        if self.strict:
            raise SyntaxError(f"Expected 'AND' or 'OR' but got {token.describe()}", token.pos)
        warnings.warn(f"Reading {token.describe()} at position {token.pos} as 'OR'", SyntaxWarning)
        return "or"
