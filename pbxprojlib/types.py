"""
The three kinds of value an old-style plist can hold. Each one is a
subclass of the matching python builtin, so a parsed tree can be used
anywhere a str, list or dict is expected.
"""


class String(str):
    """A string value, quoted or bare in the source."""
    def __repr__(self):
        return 'String(%s)' % str.__repr__(self)


class Array(list):
    """An ordered list of values."""
    def count(self, *args):
        '''
        With no argument, return the number of elements. With an argument,
        behave like list.count.
        '''
        if args:
            return list.count(self, *args)
        return len(self)

    def __repr__(self):
        return 'Array(%s)' % list.__repr__(self)


class Dictionary(dict):
    """A mapping from string keys to values."""
    def add(self, key, value):
        '''Set key to value, replacing any value already stored there.'''
        self[String(key)] = value

    def count(self):
        return len(self)

    def __repr__(self):
        return 'Dictionary(%s)' % dict.__repr__(self)
