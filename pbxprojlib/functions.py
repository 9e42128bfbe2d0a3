# encoding: utf-8
'''This file contains private functions for the pbxprojlib module.'''

import string


WHITESPACE = ' \t\n'
IDENTIFIER_CHARACTERS = frozenset(string.ascii_letters + string.digits +
                                  '$/._-')

ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\t': '\\t',
    '\r': '\\r',
}
UNESCAPES = {
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
}


def is_whitespace(character):
    return character in WHITESPACE and character != ''


def is_identifier_char(character):
    return character in IDENTIFIER_CHARACTERS


def needs_quoting(value):
    '''
    Return True if value can't be written as a bare identifier, either
    because it is empty or because it contains a character outside of
    [A-Za-z0-9$/._-]. Values containing "/*" are quoted too, since the
    tokenizer would read them as the start of a comment.
    '''
    if not value or '/*' in value:
        return True
    for character in value:
        if character not in IDENTIFIER_CHARACTERS:
            return True
    return False


def quote_string(value):
    '''Return value as a double quoted literal with escapes applied.'''
    parts = ['"']
    for character in value:
        if character in ESCAPES:
            parts.append(ESCAPES[character])
        elif ord(character) < 0x20 or ord(character) == 0x7f:
            parts.append('\\U%04x' % ord(character))
        else:
            parts.append(character)
    parts.append('"')
    return ''.join(parts)


def unquote_string(literal):
    '''
    Strip the enclosing quotes from a quoted literal and interpret its
    escape sequences. A literal that isn't quoted is returned unchanged.
    '''
    if len(literal) < 2 or literal[0] != '"' or literal[-1] != '"':
        return literal
    body = literal[1:-1]
    parts = []
    index = 0
    length = len(body)
    while index < length:
        character = body[index]
        index += 1
        if character != '\\' or index == length:
            parts.append(character)
            continue
        escaped = body[index]
        index += 1
        if escaped in UNESCAPES:
            parts.append(UNESCAPES[escaped])
        elif escaped in 'Uu' and _is_hex(body[index:index + 4]):
            parts.append(chr(int(body[index:index + 4], 16)))
            index += 4
        elif escaped in '01234567':
            digits = escaped
            while (len(digits) < 3 and index < length and
                   body[index] in '01234567'):
                digits += body[index]
                index += 1
            parts.append(chr(int(digits, 8)))
        else:
            parts.append(escaped)
    return ''.join(parts)


def _is_hex(digits):
    return len(digits) == 4 and all(c in string.hexdigits for c in digits)
