'''
Custom exception classes, for finer grained error handling
'''


class CNFpyException(Exception):
    '''Parent class for all our exceptions'''
    pass


class LexicalError(CNFpyException):
    '''Raised when the formula text contains a character that is not part of the token set'''

    def __init__(self, char, pos):
        self.char = char
        self.pos = pos
        super().__init__(f"Unexpected character {char!r} at position {pos}")


class SyntaxError(CNFpyException):
    '''Raised when the token stream does not match the formula grammar'''

    def __init__(self, message, pos=None):
        self.pos = pos
        if pos is not None:
            message = f"{message} at position {pos}"
        super().__init__(message)


class TransformationNotImplementedError(CNFpyException):
    '''Raised when a transformation is not implemented for a certain expression'''
    pass


class DimacsFormatError(CNFpyException):
    '''Raised when a DIMACS file does not follow the format'''
    pass
