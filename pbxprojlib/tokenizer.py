# encoding: utf-8
'''
This file contains the tokenizer for old-style plists. The tokenizer works
one physical line at a time and hands out one Token per call to next().
'''

from collections import namedtuple
from .errors import TokenizeError
from .functions import is_identifier_char, is_whitespace


HEADER_LINE = '// !$*UTF8*$!'

END_OF_FILE = 1
END_OF_LINE = 2
WHITESPACE = 3
COMMENT = 4
HEADER = 5
IDENTIFIER = 6
OPEN_BRACE = 7
CLOSE_BRACE = 8
EQUALS = 9
SEMICOLON = 10
COMMA = 11
OPEN_PAREN = 12
CLOSE_PAREN = 13
ILLEGAL = 14

KIND_NAMES = {
    END_OF_FILE: 'EndOfFile',
    END_OF_LINE: 'EndOfLine',
    WHITESPACE: 'Whitespace',
    COMMENT: 'Comment',
    HEADER: 'Header',
    IDENTIFIER: 'Identifier',
    OPEN_BRACE: 'OpenBrace',
    CLOSE_BRACE: 'CloseBrace',
    EQUALS: 'Equals',
    SEMICOLON: 'Semicolon',
    COMMA: 'Comma',
    OPEN_PAREN: 'OpenParen',
    CLOSE_PAREN: 'CloseParen',
    ILLEGAL: 'Illegal',
}

PUNCTUATION = {
    '{': OPEN_BRACE,
    '}': CLOSE_BRACE,
    '(': OPEN_PAREN,
    ')': CLOSE_PAREN,
    '=': EQUALS,
    ';': SEMICOLON,
    ',': COMMA,
}


class Token(namedtuple('Token', 'kind literal line position')):
    """
    A classified piece of the source. line is 1-based, position is the
    0-based offset of the first character within that line. literal is
    empty for punctuation and for the end of line/file markers.
    """
    __slots__ = ()

    def __repr__(self):
        name = KIND_NAMES.get(self.kind, 'Unknown')
        if self.kind in (COMMENT, IDENTIFIER, ILLEGAL):
            return 'Token(%s, %r)' % (name, self.literal)
        return 'Token(%s)' % name


class Tokenizer(object):
    '''
    Split a plist source into tokens. file_object can be anything that
    yields lines when iterated: an open file in binary or text mode, a
    BytesIO, or a plain list of strings. Byte lines are decoded as UTF-8.
    '''
    def __init__(self, file_object):
        self.lines = iter(file_object)
        self.line = 0
        self.buffer = ''
        self.index = None
        self.finished = False

    def __iter__(self):
        while True:
            token = self.next()
            if token.kind == END_OF_FILE:
                return
            yield token

    def next(self):
        '''
        Return the next token. Once the input is exhausted this keeps
        returning an END_OF_FILE token.
        '''
        if self.index is None:
            if not self.advance_line():
                return Token(END_OF_FILE, '', max(self.line, 1), 0)
            if self.buffer == HEADER_LINE:
                self.index = None
                return Token(HEADER, HEADER_LINE, self.line, 0)
        if self.index == len(self.buffer):
            position = self.index
            self.index = None
            return Token(END_OF_LINE, '', self.line, position)
        character = self.buffer[self.index]
        if is_whitespace(character):
            return self.scan_whitespace()
        if self.buffer.startswith('/*', self.index):
            return self.scan_comment()
        if is_identifier_char(character):
            return self.scan_identifier()
        if character == '"':
            return self.scan_string()
        return self.scan_punctuation()

    def advance_line(self):
        '''
        Load the next physical line into the buffer. Return False when
        there are no more lines.
        '''
        if self.finished:
            return False
        try:
            line = next(self.lines)
        except StopIteration:
            self.finished = True
            self.index = None
            return False
        if isinstance(line, bytes):
            try:
                line = line.decode('utf-8')
            except UnicodeDecodeError as error:
                raise TokenizeError('Invalid UTF-8', self.line + 1,
                                    error.start)
        if line.endswith('\n'):
            line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
        if self.line == 0 and line.startswith(u'\ufeff'):
            line = line[1:]
        self.line += 1
        self.buffer = line
        self.index = 0
        return True

    def scan_whitespace(self):
        start = self.index
        while (self.index < len(self.buffer) and
               is_whitespace(self.buffer[self.index])):
            self.index += 1
        return Token(WHITESPACE, self.buffer[start:self.index],
                     self.line, start)

    def scan_identifier(self):
        start = self.index
        while (self.index < len(self.buffer) and
               is_identifier_char(self.buffer[self.index])):
            self.index += 1
        return Token(IDENTIFIER, self.buffer[start:self.index],
                     self.line, start)

    def scan_comment(self):
        '''
        Scan a /* ... */ comment, which may run over several lines. The
        literal is the verbatim comment, delimiters included.
        '''
        line, start = self.line, self.index
        parts = ['/*']
        self.index += 2
        while True:
            end = self.buffer.find('*/', self.index)
            if end != -1:
                parts.append(self.buffer[self.index:end + 2])
                self.index = end + 2
                return Token(COMMENT, ''.join(parts), line, start)
            parts.append(self.buffer[self.index:])
            parts.append('\n')
            if not self.advance_line():
                raise TokenizeError('Unterminated comment', line, start)

    def scan_string(self):
        '''
        Scan a double quoted string, which may run over several lines. A
        backslash escapes the character after it. The literal keeps the
        quotes and escapes exactly as written.
        '''
        line, start = self.line, self.index
        parts = ['"']
        self.index += 1
        escaped = False
        while True:
            begin = self.index
            while self.index < len(self.buffer):
                character = self.buffer[self.index]
                self.index += 1
                if escaped:
                    escaped = False
                elif character == '\\':
                    escaped = True
                elif character == '"':
                    parts.append(self.buffer[begin:self.index])
                    return Token(IDENTIFIER, ''.join(parts), line, start)
            parts.append(self.buffer[begin:])
            parts.append('\n')
            escaped = False
            if not self.advance_line():
                raise TokenizeError('Unterminated string', line, start)

    def scan_punctuation(self):
        character = self.buffer[self.index]
        position = self.index
        self.index += 1
        kind = PUNCTUATION.get(character)
        if kind is None:
            token = Token(ILLEGAL, character, self.line, position)
            raise TokenizeError('Illegal character %r' % character,
                                self.line, position, token)
        return Token(kind, '', self.line, position)
