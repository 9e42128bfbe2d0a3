#!/usr/bin/env python
# encoding: utf-8
"""Tests for encoding and the public functions of pbxprojlib."""

from io import BytesIO
import os
import shutil
import tempfile
import unittest
import pbxprojlib as pl


HEADER_LINE = '// !$*UTF8*$!\n'

PROJECT = HEADER_LINE + '''{
	archiveVersion = 1;
	classes = {
	};
	objectVersion = 46;
	objects = {

/* Begin PBXFileReference section */
		0A1B2C3D /* main.m */ = {isa = PBXFileReference; lastKnownFileType = sourcecode.c.objc; path = main.m; sourceTree = "<group>"; };
/* End PBXFileReference section */

/* Begin PBXGroup section */
		0A1B2C40 = {
			isa = PBXGroup;
			children = (
				0A1B2C3D /* main.m */,
			);
			sourceTree = "<group>";
		};
/* End PBXGroup section */
	};
	rootObject = 0A1B2C40 /* Project object */;
}
'''


class Tests(unittest.TestCase):

    def test_encode_empty_array(self):
        self.assertEqual(pl.encode(pl.Array()), '()')

    def test_encode_empty_dictionary(self):
        self.assertEqual(pl.encode(pl.Dictionary()), '{\n}')

    def test_encode_string(self):
        self.assertEqual(pl.encode(pl.String('Foo')), '"Foo"')

    def test_encode_string_escapes(self):
        value = pl.String('say "hi"\\\n\t\x01')
        self.assertEqual(pl.encode(value), r'"say \"hi\"\\\n\t\U0001"')

    def test_encode_bare_strings(self):
        value = pl.Array(['Foo.swift', 'two words', '', 'a/*b'])
        self.assertEqual(pl.encode(value, quote_all=False),
                         '(\n\tFoo.swift,\n\t"two words",\n\t"",\n'
                         '\t"a/*b",\n)')

    def test_encode_array(self):
        value = pl.Array([pl.String('Foo'), pl.String('Bar')])
        self.assertEqual(pl.encode(value), '(\n\t"Foo",\n\t"Bar",\n)')

    def test_encode_dictionary(self):
        value = pl.Dictionary()
        value.add('foo', pl.String('1'))
        value.add('bar', pl.Array([pl.String('x')]))
        self.assertEqual(pl.encode(value),
                         '{\n'
                         '\t"foo" = "1";\n'
                         '\t"bar" = (\n'
                         '\t\t"x",\n'
                         '\t);\n'
                         '}')

    def test_encode_indentation(self):
        value = pl.Dictionary(a=pl.Dictionary(b=pl.Dictionary()))
        self.assertEqual(pl.encode(value, quote_all=False),
                         '{\n'
                         '\ta = {\n'
                         '\t\tb = {\n'
                         '\t\t};\n'
                         '\t};\n'
                         '}')

    def test_encode_starting_indent(self):
        value = pl.Array(['x'])
        self.assertEqual(pl.encode(value, indent=2),
                         '(\n\t\t\t"x",\n\t\t)')

    def test_encode_builtin_types(self):
        value = {'files': ['a', ['b']], 'name': 'x'}
        self.assertEqual(through_string(value), value)
        self.assertEqual(pl.encode(('a',)), '(\n\t"a",\n)')

    def test_encode_unsupported_type(self):
        self.assertRaises(TypeError, pl.encode, pl.Array([1]))
        self.assertRaises(TypeError, pl.dumps, {'a': None})

    def test_encode_non_string_key(self):
        self.assertRaises(TypeError, pl.encode, {1: 'a'})

    def test_dumps_header(self):
        data = pl.dumps(pl.Array())
        self.assertIsInstance(data, bytes)
        self.assertEqual(data, b'// !$*UTF8*$!\n()\n')

    def test_empty_array(self):
        value = pl.Array()
        result = through_string(value)
        self.assertIsInstance(result, pl.Array)
        self.assertEqual(result.count(), 0)

    def test_array(self):
        value = pl.Array([pl.String('Foo'), pl.String('Bar'),
                          pl.String('Baz')])
        result = through_string(value)
        self.assertIsInstance(result, pl.Array)
        self.assertEqual(value, result)

    def test_nested_array(self):
        value = pl.Array([pl.Array(), pl.Array([pl.String('a')]),
                          pl.Dictionary()])
        result = through_string(value)
        self.assertEqual(value, result)
        self.assertIsInstance(result[2], pl.Dictionary)

    def test_dictionary(self):
        value = pl.Dictionary()
        value.add('foo', pl.String('1'))
        value.add('bar', pl.String('2'))
        result = through_string(value)
        self.assertIsInstance(result, pl.Dictionary)
        self.assertEqual(set(value.keys()), set(result.keys()))
        self.assertEqual(value, result)

    def test_awkward_strings(self):
        value = pl.Array([pl.String(s) for s in
                          ['', ' ', 'a"b', 'back\\slash', '\\', 'tab\tline\n',
                           '/* not a comment */', u'caf\xe9', '\x7f',
                           '$(SRCROOT)/Foo.swift', '"', '{};(),=']])
        for quote_all in (True, False):
            result = through_string(value, quote_all=quote_all)
            self.assertEqual(value, result)

    def test_round_trip_is_stable(self):
        first = pl.dumps(pl.loads(PROJECT))
        second = pl.dumps(pl.loads(first))
        self.assertEqual(first, second)

    def test_project_text(self):
        root = pl.loads(PROJECT)
        self.assertEqual(root['objectVersion'], '46')
        self.assertEqual(root['rootObject'], '0A1B2C40')
        group = root['objects']['0A1B2C40']
        self.assertEqual(group['children'], ['0A1B2C3D'])
        self.assertEqual(group['sourceTree'], '<group>')
        self.assertEqual(list(root['objects'].keys()),
                         ['0A1B2C3D', '0A1B2C40'])

    def test_loads_str_and_bytes(self):
        self.assertEqual(pl.loads(PROJECT), pl.loads(PROJECT.encode('utf-8')))

    def test_loads_options(self):
        data = HEADER_LINE + '{a=1; a=2;}\n'
        self.assertEqual(pl.loads(data), {'a': '2'})
        self.assertRaises(pl.DuplicateKeyError, pl.loads, data, strict=True)
        self.assertRaises(pl.NestingError, pl.loads, HEADER_LINE + '(())',
                          max_depth=1)

    def test_load_missing_header(self):
        self.assertRaises(pl.ParseError, pl.loads, '()\n')

    def test_load_empty_input(self):
        with self.assertRaises(pl.ParseError) as context:
            pl.loads(b'')
        self.assertEqual(context.exception.line, 1)

    def test_load_invalid_utf8(self):
        data = b'// !$*UTF8*$!\n("caf\xe9", )\n'
        with self.assertRaises(pl.PlistError) as context:
            pl.loads(data)
        self.assertIsInstance(context.exception, pl.TokenizeError)
        self.assertEqual(context.exception.line, 2)

    def test_legacy_names(self):
        self.assertIs(pl.readPlistFromString, pl.loads)
        self.assertIs(pl.writePlistToString, pl.dumps)

    def test_modify_and_write(self):
        root = pl.loads(PROJECT)
        root['objects']['0A1B2C40']['children'].append(pl.String('0A1B2C41'))
        root['objects'].add('0A1B2C41', pl.Dictionary(isa='PBXFileReference',
                                                       path='b.m'))
        result = through_string(root)
        self.assertEqual(result['objects']['0A1B2C40']['children'],
                         ['0A1B2C3D', '0A1B2C41'])
        self.assertEqual(result['objects']['0A1B2C41']['path'], 'b.m')

    def test_string_representation(self):
        self.assertEqual(repr(pl.String('a')), "String('a')")
        self.assertEqual(repr(pl.Array([pl.String('a')])),
                         "Array([String('a')])")

    def test_dictionary_add_makes_string_keys(self):
        value = pl.Dictionary()
        value.add('a', pl.String('1'))
        value.add('a', pl.String('2'))
        self.assertEqual(value.count(), 1)
        self.assertIsInstance(list(value.keys())[0], pl.String)
        self.assertEqual(value['a'], '2')

    def test_array_count_with_argument(self):
        value = pl.Array(['a', 'b', 'a'])
        self.assertEqual(value.count(), 3)
        self.assertEqual(value.count('a'), 2)


class FileTests(unittest.TestCase):

    def setUp(self):
        self.directory = tempfile.mkdtemp()
        self.path = os.path.join(self.directory, 'project.pbxproj')

    def tearDown(self):
        shutil.rmtree(self.directory)

    def test_write_and_read_path(self):
        value = pl.Dictionary(name=pl.String('Foo'))
        pl.writePlist(value, self.path)
        result = pl.readPlist(self.path)
        self.assertIsInstance(result, pl.Dictionary)
        self.assertEqual(value, result)

    def test_write_and_read_file(self):
        value = pl.Array([pl.String('Foo')])
        with open(self.path, 'wb') as file_object:
            pl.writePlist(value, file_object)
        with open(self.path, 'rb') as file_object:
            result = pl.readPlist(file_object)
        self.assertEqual(value, result)

    def test_read_text_mode_file(self):
        with open(self.path, 'w') as file_object:
            file_object.write(PROJECT)
        with open(self.path) as file_object:
            result = pl.load(file_object)
        self.assertEqual(result, pl.loads(PROJECT))

    def test_project(self):
        with open(self.path, 'w') as file_object:
            file_object.write(PROJECT)
        project = pl.Project.open(self.path)
        project.root['objectVersion'] = pl.String('50')
        project.write(self.path)
        self.assertEqual(pl.Project.open(self.path).root['objectVersion'],
                         '50')

    def test_project_encode(self):
        project = pl.Project.read(BytesIO(PROJECT.encode('utf-8')))
        output = BytesIO()
        project.encode(output)
        self.assertTrue(output.getvalue().startswith(b'// !$*UTF8*$!\n{\n'))
        self.assertTrue(output.getvalue().endswith(b'}\n'))
        self.assertEqual(pl.loads(output.getvalue()), project.root)

    def test_project_open_strict(self):
        with open(self.path, 'w') as file_object:
            file_object.write(HEADER_LINE + '{a=1; a=2;}\n')
        self.assertRaises(pl.DuplicateKeyError, pl.Project.open, self.path,
                          strict=True)


def through_string(value, quote_all=True):
    plist = pl.dumps(value, quote_all=quote_all)
    return pl.loads(plist)


def suite():
    loader = unittest.defaultTestLoader
    suite = unittest.TestSuite()
    suite.addTests(loader.loadTestsFromTestCase(Tests))
    suite.addTests(loader.loadTestsFromTestCase(FileTests))
    return suite


if __name__ == '__main__':
    unittest.main()
