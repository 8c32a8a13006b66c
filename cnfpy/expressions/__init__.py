"""
    Classes and functions that represent, read and create propositional formulas

    ==================
    List of submodules
    ==================
    .. autosummary::
        :nosignatures:

        lexer
        parser
        variables
        core
"""

# we only import methods/classes that are used for modelling
# others need to be imported by the developer explicitely
from .lexer import tokenize, Token, TokenType
from .parser import parse
from .variables import boolvar, BoolVar
from .core import Expression, Operator
