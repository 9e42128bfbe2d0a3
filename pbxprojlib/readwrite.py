# encoding: utf-8
'''This file contains private read/write functions for the pbxprojlib module.'''

import logging
from .classes import ObjectHandler
from .parser import Parser, DEFAULT_MAX_DEPTH
from .tokenizer import Tokenizer, HEADER_LINE


logger = logging.getLogger(__name__)


def read(file_object, max_depth=DEFAULT_MAX_DEPTH, strict=False):
    '''
    Read an old-style plist from an open file object, or any other
    iterable of lines. Return the root object.
    '''
    logger.debug('Reading plist from %r', file_object)
    tokenizer = Tokenizer(file_object)
    parser = Parser(tokenizer, max_depth=max_depth, strict=strict)
    root_object = parser.parse()
    logger.debug('Read %d lines', tokenizer.line)
    return root_object


def encode(root_object, indent=0, quote_all=True):
    '''Return the text for root_object, without the header line.'''
    object_handler = ObjectHandler(quote_all=quote_all)
    return object_handler.encode(root_object, indent)


def write(file_object, root_object, quote_all=True):
    '''Write the header and root_object to file_object as UTF-8.'''
    logger.debug('Writing %s to %r', type(root_object).__name__,
                 file_object)
    text = '%s\n%s\n' % (HEADER_LINE, encode(root_object,
                                             quote_all=quote_all))
    file_object.write(text.encode('utf-8'))
