from .functions import needs_quoting, quote_string
from .types import Array, Dictionary, String


INDENT = '\t'


class BaseHandler(object):
    def __init__(self):
        self.object_handler = None

    def set_object_handler(self, object_handler):
        self.object_handler = object_handler

    def encode(self, object_, indent):
        return ''

    def encode_child(self, object_, indent):
        return self.object_handler.encode(object_, indent)


class StringHandler(BaseHandler):
    def __init__(self, quote_all=True):
        BaseHandler.__init__(self)
        self.types = (String, str)
        self.quote_all = quote_all

    def encode(self, string, indent):
        '''
        Return string as a quoted literal. Unless quote_all is set, strings
        that are valid bare identifiers are written without quotes.
        '''
        if self.quote_all or needs_quoting(string):
            return quote_string(string)
        return str(string)


class ContainerHandler(BaseHandler):
    def indentation(self, indent):
        return INDENT * indent


class ArrayHandler(ContainerHandler):
    def __init__(self):
        ContainerHandler.__init__(self)
        self.types = (Array, list, tuple)

    def encode(self, array, indent):
        if not array:
            return '()'
        inner = self.indentation(indent + 1)
        lines = ['(\n']
        for item in array:
            lines.append('%s%s,\n' % (inner,
                                      self.encode_child(item, indent + 1)))
        lines.append(self.indentation(indent))
        lines.append(')')
        return ''.join(lines)


class DictionaryHandler(ContainerHandler):
    def __init__(self):
        ContainerHandler.__init__(self)
        self.types = (Dictionary, dict)

    def encode(self, dictionary, indent):
        inner = self.indentation(indent + 1)
        lines = ['{\n']
        for key, value in dictionary.items():
            if not isinstance(key, str):
                raise TypeError('Dictionary keys must be strings, not %r'
                                % (key,))
            lines.append('%s%s = %s;\n' % (inner,
                                           self.encode_child(key, indent + 1),
                                           self.encode_child(value,
                                                             indent + 1)))
        lines.append(self.indentation(indent))
        lines.append('}')
        return ''.join(lines)


class ObjectHandler(object):
    '''Pick the handler for each value by its type and encode with it.'''
    def __init__(self, quote_all=True):
        self.handlers = [StringHandler(quote_all), ArrayHandler(),
                         DictionaryHandler()]
        self.handlers_by_type = {}
        for handler in self.handlers:
            handler.set_object_handler(self)
            for type_ in handler.types:
                self.handlers_by_type.update({type_: handler})

    def get_handler(self, object_):
        handler = self.handlers_by_type.get(type(object_))
        if handler is not None:
            return handler
        for handler in self.handlers:
            if isinstance(object_, handler.types):
                return handler
        raise TypeError('Can not encode object of type %s'
                        % type(object_).__name__)

    def encode(self, object_, indent=0):
        handler = self.get_handler(object_)
        return handler.encode(object_, indent)
