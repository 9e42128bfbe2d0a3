# encoding: utf-8
'''
This file contains the recursive descent parser for old-style plists.

    document   := Header root
    root       := dictionary | array
    value      := dictionary | array | string
    dictionary := '{' (string '=' value ';')* '}'
    array      := '(' (value ',')* ')'

Whitespace, comments and line ends are dropped before the grammar sees
them.
'''

import logging
from .errors import DuplicateKeyError, NestingError, ParseError
from .functions import unquote_string
from .tokenizer import (KIND_NAMES, END_OF_FILE, END_OF_LINE, WHITESPACE,
                        COMMENT, HEADER, IDENTIFIER, OPEN_BRACE, CLOSE_BRACE,
                        EQUALS, SEMICOLON, COMMA, OPEN_PAREN, CLOSE_PAREN)
from .types import Array, Dictionary, String


logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256
INSIGNIFICANT = frozenset((WHITESPACE, COMMENT, END_OF_LINE))


class Parser(object):
    '''
    Build a value tree from the tokens of one document. A Parser is used
    for exactly one call to parse().

    max_depth bounds how deeply arrays and dictionaries may nest. With
    strict set, a key that appears twice in one dictionary is an error;
    otherwise the last value wins.
    '''
    def __init__(self, tokenizer, max_depth=DEFAULT_MAX_DEPTH, strict=False):
        self.tokenizer = tokenizer
        self.max_depth = max_depth
        self.strict = strict
        self.lookahead = None
        self.depth = 0

    def parse(self):
        '''Parse the whole document and return the root value.'''
        self.parse_header()
        token = self.peek()
        if token.kind == OPEN_BRACE:
            root = self.parse_dictionary()
        elif token.kind == OPEN_PAREN:
            root = self.parse_array()
        else:
            raise ParseError('Expected OpenBrace or OpenParen', token)
        self.expect(END_OF_FILE)
        logger.debug('Parsed %s with %d entries', type(root).__name__,
                     len(root))
        return root

    def peek(self):
        '''Return the next significant token without consuming it.'''
        if self.lookahead is None:
            self.lookahead = self.read_token()
        return self.lookahead

    def token(self):
        '''Consume and return the next significant token.'''
        if self.lookahead is not None:
            token, self.lookahead = self.lookahead, None
            return token
        return self.read_token()

    def read_token(self):
        while True:
            token = self.tokenizer.next()
            if token.kind not in INSIGNIFICANT:
                return token

    def expect(self, kind):
        token = self.token()
        if token.kind != kind:
            raise ParseError('Expected %s' % KIND_NAMES[kind], token)
        return token

    def parse_header(self):
        token = self.token()
        if token.kind != HEADER:
            raise ParseError('Expected Header', token)

    def parse_value(self):
        token = self.peek()
        if token.kind == OPEN_BRACE:
            return self.parse_dictionary()
        if token.kind == OPEN_PAREN:
            return self.parse_array()
        if token.kind == IDENTIFIER:
            return self.parse_string()
        raise ParseError('Expected OpenBrace, OpenParen or Identifier', token)

    def parse_string(self):
        token = self.token()
        if token.kind != IDENTIFIER:
            raise ParseError('Expected Identifier', token)
        return String(unquote_string(token.literal))

    def parse_dictionary(self):
        opening = self.expect(OPEN_BRACE)
        self.enter(opening)
        dictionary = Dictionary()
        while self.peek().kind != CLOSE_BRACE:
            key_token = self.peek()
            key = self.parse_string()
            self.expect(EQUALS)
            value = self.parse_value()
            self.expect(SEMICOLON)
            if self.strict and key in dictionary:
                raise DuplicateKeyError('Duplicate key %r' % str(key),
                                        key_token)
            dictionary.add(key, value)
        self.token()
        self.depth -= 1
        return dictionary

    def parse_array(self):
        opening = self.expect(OPEN_PAREN)
        self.enter(opening)
        array = Array()
        while self.peek().kind != CLOSE_PAREN:
            array.append(self.parse_value())
            self.expect(COMMA)
        self.token()
        self.depth -= 1
        return array

    def enter(self, token):
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingError('Nested deeper than %d levels' %
                               self.max_depth, token)
