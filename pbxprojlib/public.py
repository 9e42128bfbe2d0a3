# encoding: utf-8
"""This file contains the public functions for the module pbxprojlib."""

import os
from io import BytesIO
from .parser import DEFAULT_MAX_DEPTH
from .readwrite import read, write, encode


#########
## API ##
#########

# load(fp, max_depth=256, strict=False)
# loads(data, max_depth=256, strict=False)
# dump(value, fp, quote_all=True)
# dumps(value, quote_all=True)
# encode(value, indent=0, quote_all=True)

def dump(obj, fp, quote_all=True):
    write(fp, obj, quote_all)


def dumps(obj, quote_all=True):
    fp = BytesIO()
    dump(obj, fp, quote_all)
    return fp.getvalue()


def load(fp, max_depth=DEFAULT_MAX_DEPTH, strict=False):
    return read(fp, max_depth, strict)


def loads(data, max_depth=DEFAULT_MAX_DEPTH, strict=False):
    if isinstance(data, str):
        data = data.encode('utf-8')
    return load(BytesIO(data), max_depth, strict)


################
## Legacy API ##
################


def readPlist(path_or_file, max_depth=DEFAULT_MAX_DEPTH, strict=False):
    """
    Read an old-style plist from path_or_file and return the root object.
    See load for max_depth and strict.
    """
    if isinstance(path_or_file, (str, os.PathLike)):
        with open(path_or_file, 'rb') as file_object:
            return load(file_object, max_depth, strict)
    return load(path_or_file, max_depth, strict)


def writePlist(root_object, path_or_file, quote_all=True):
    """
    Write root_object to path_or_file, header line included. With
    quote_all set to False, strings that are valid bare identifiers are
    written without quotes.
    """
    if isinstance(path_or_file, (str, os.PathLike)):
        with open(path_or_file, 'wb') as file_object:
            dump(root_object, file_object, quote_all)
    else:
        dump(root_object, path_or_file, quote_all)


writePlistToString = dumps
readPlistFromString = loads


class Project(object):
    '''
    A project file held in memory. root is the top level value, usually a
    Dictionary, which the caller may change before writing it back out.
    '''
    def __init__(self, root):
        self.root = root

    @classmethod
    def open(cls, path, **kwargs):
        return cls(readPlist(path, **kwargs))

    @classmethod
    def read(cls, file_object, **kwargs):
        return cls(load(file_object, **kwargs))

    def encode(self, file_object, quote_all=True):
        dump(self.root, file_object, quote_all)

    def write(self, path_or_file, quote_all=True):
        writePlist(self.root, path_or_file, quote_all)

    def __repr__(self):
        return 'Project(%r)' % (self.root,)
