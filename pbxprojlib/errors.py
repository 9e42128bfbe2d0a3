# encoding: utf-8
"""Exceptions raised while reading old-style plists."""


class PlistError(ValueError):
    """Base class for everything that can go wrong reading a plist."""


class TokenizeError(PlistError):
    """
    A lexical error: an unterminated comment or string, or a character
    that can't start any token. line is 1-based, position is the 0-based
    offset into that line.
    """
    def __init__(self, message, line, position, token=None):
        PlistError.__init__(self, '%s at line %d, column %d' %
                            (message, line, position + 1))
        self.line = line
        self.position = position
        self.token = token


class ParseError(PlistError):
    """A syntactic error, located at the offending token."""
    def __init__(self, message, token):
        PlistError.__init__(self, '%s, got %r at line %d, column %d' %
                            (message, token, token.line, token.position + 1))
        self.token = token
        self.kind = token.kind
        self.line = token.line
        self.position = token.position


class NestingError(ParseError):
    """Arrays and dictionaries are nested deeper than the allowed maximum."""


class DuplicateKeyError(ParseError):
    """A dictionary key appears twice. Only raised in strict mode."""
