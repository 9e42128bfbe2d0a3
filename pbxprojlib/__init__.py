# encoding: utf-8
"""
pbxprojlib: Read and write old-style plists such as Xcode .pbxproj files.

The calling convention follows plistlib. To read a plist use one of:

    load(file_object)
    loads(data)
    readPlist(path_or_file)

These return the root object, an Array or a Dictionary. Values inside
are String, Array or Dictionary, which subclass str, list and dict.
Reading raises a PlistError (a ValueError) on malformed input; more
precisely a TokenizeError, a ParseError, or one of its subclasses
NestingError and DuplicateKeyError. The keyword arguments max_depth
and strict bound how deeply containers may nest and turn duplicate
dictionary keys into an error.

To write a plist, header line included, use one of:

    dump(root_object, file_object)
    dumps(root_object)
    writePlist(root_object, path_or_file)

Strings are always quoted. Pass quote_all=False to write strings that
are valid bare identifiers without quotes. encode(value) returns the
text for a single value without the header.

Project wraps a root object for a read, modify, write session:

    project = Project.open('project.pbxproj')
    project.root['objects'].add('ABCD', Dictionary(isa='PBXGroup'))
    project.write('project.pbxproj')


Known issues:
Comments in the source are discarded, so writing a plist back drops
them. Dictionary order is kept.
"""

import logging
from .public import readPlist, readPlistFromString
from .public import writePlist, writePlistToString
from .public import dump, dumps, load, loads, encode, Project
from .types import String, Array, Dictionary
from .errors import PlistError, TokenizeError, ParseError
from .errors import NestingError, DuplicateKeyError


__all__ = ['readPlist', 'readPlistFromString',
           'writePlist', 'writePlistToString',
           'dump', 'dumps', 'load', 'loads', 'encode', 'Project',
           'String', 'Array', 'Dictionary',
           'PlistError', 'TokenizeError', 'ParseError',
           'NestingError', 'DuplicateKeyError']

logging.getLogger(__name__).addHandler(logging.NullHandler())

__packages__ = ['pbxprojlib']
__version__ = '0.1'
__author__ = 'Stephen Morton'
__author_email__ = 'tungolcraft@gmail.com'
__description__ = 'Read and write old-style plists and .pbxproj files.'
__license__ = 'BSD'
__platforms__ = 'any'
__classifiers__ = [
  'Development Status :: 4 - Beta',
  'Intended Audience :: Developers',
  'License :: OSI Approved :: BSD License',
  'Operating System :: OS Independent',
  'Programming Language :: Python :: 3',
  'Topic :: Software Development :: Libraries :: Python Modules',
]
