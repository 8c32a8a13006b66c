#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## lexer.py
##
"""
    Splits the text of a formula into tokens.

    The token set is small:

    ===================  ==========================
    Text                 Token
    ===================  ==========================
    `NOT`                `TokenType.NOT`
    `AND`                `TokenType.AND`
    `OR`                 `TokenType.OR`
    `(`                  `TokenType.LPAREN`
    `)`                  `TokenType.RPAREN`
    `x1`, `a_b`, `and`   `TokenType.IDENTIFIER`
    ===================  ==========================

    Keywords are case-sensitive: `AND` is the operator but `and` is an identifier.
    An identifier starts with an (ASCII) letter, followed by letters, digits and underscores.
    Whitespace separates tokens and is otherwise ignored.
    Any other character raises a :class:`~cnfpy.exceptions.LexicalError`.

    The token list always ends with a single `TokenType.END` token.
"""
from enum import Enum

from ..exceptions import LexicalError


class TokenType(Enum):
    NOT = "NOT"
    AND = "AND"
    OR = "OR"
    LPAREN = "("
    RPAREN = ")"
    IDENTIFIER = "IDENTIFIER"
    END = "END"


KEYWORDS = {"NOT": TokenType.NOT, "AND": TokenType.AND, "OR": TokenType.OR}


class Token(object):
    """
    A token of the formula, with its type, its text and its position (offset) in the formula
    """

    def __init__(self, type, value="", pos=0):
        self.type = type
        self.value = value
        self.pos = pos

    def __repr__(self):
        if self.type == TokenType.IDENTIFIER:
            return f"Token({self.type.name}, {self.value!r}, {self.pos})"
        return f"Token({self.type.name}, {self.pos})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.pos) == (other.type, other.value, other.pos)

    def __hash__(self):
        return hash((self.type, self.value, self.pos))

    def describe(self):
        """ human readable description, for error messages """
        if self.type == TokenType.END:
            return "end of input"
        if self.type == TokenType.IDENTIFIER:
            return f"identifier '{self.value}'"
        return f"'{self.value}'"


def _is_letter(c):
    return c.isascii() and c.isalpha()


def _is_word_char(c):
    return c.isascii() and (c.isalnum() or c == "_")


def tokenize(text):
    """
        Turn the formula `text` into a list of tokens, in order of appearance.

        :param text: the formula as a string
        :return: list of :class:`Token`, the last one of type `TokenType.END`
        :raises LexicalError: on a character outside of the token set
    """
    tokens = []
    pos = 0
    n = len(text)

    while pos < n:
        c = text[pos]
        if c.isspace():
            pos += 1
        elif c == "(":
            tokens.append(Token(TokenType.LPAREN, c, pos))
            pos += 1
        elif c == ")":
            tokens.append(Token(TokenType.RPAREN, c, pos))
            pos += 1
        elif _is_letter(c):
            start = pos
            while pos < n and _is_word_char(text[pos]):
                pos += 1
            word = text[start:pos]
            tokens.append(Token(KEYWORDS.get(word, TokenType.IDENTIFIER), word, start))
        else:
            raise LexicalError(c, pos)

    tokens.append(Token(TokenType.END, "", n))
    return tokens
