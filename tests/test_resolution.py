"""
# Verso: test_resolution.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `resolution.py`.
"""

import unittest

from verso.exceptions import (
    FragmentNotFoundException,
    InvalidMetadataFieldException,
    MalformedReferenceException,
    WeaveException,
)
from verso.fragments import Fragment, FragmentStore
from verso.resolution import ReferenceResolver
from verso.symbols import Symbols


def build_resolver(symbols: Symbols = None) -> ReferenceResolver:
    if symbols is None:
        symbols = Symbols()

    fragment_store = FragmentStore([
        Fragment('greet', 'src/hello.py', 2, 0, 'print("hi")'),
        Fragment('multi', 'src/lib.rs', 10, 0, 'one\ntwo'),
        Fragment('b1', 'b.py', 2, 0, 'B1'),
        Fragment('a2', 'a.py', 6, 0, 'A2'),
        Fragment('a1', 'a.py', 2, 0, 'A1'),
        Fragment('meta', 'meta.md', 1, 0, 'use @@greet'),
        Fragment('backslash', 'regex.py', 3, 0, r'a\1\g<0>b'),
    ])

    return ReferenceResolver(fragment_store, symbols)


class TestResolution(unittest.TestCase):
    def test_resolve_line_without_references(self):
        reference_resolver = build_resolver()
        self.assertEqual(reference_resolver.resolve_line('Plain prose.\n', 'docs/guide.md', 1), 'Plain prose.\n')
        self.assertEqual(reference_resolver.resolve_line('email@example.com\n', 'docs/guide.md', 1),
                         'email@example.com\n')

    def test_resolve_direct(self):
        reference_resolver = build_resolver()
        self.assertEqual(reference_resolver.resolve_line('@@greet\n', 'docs/guide.md', 1), 'print("hi")\n')
        self.assertEqual(
            reference_resolver.resolve_line('before @@multi after\n', 'docs/guide.md', 1),
            'before one\ntwo after\n',
        )
        self.assertEqual(
            reference_resolver.resolve_line('@@a1, @@a2.\n', 'docs/guide.md', 1),
            'A1, A2.\n',
        )

    def test_resolve_direct_is_literal(self):
        reference_resolver = build_resolver()
        self.assertEqual(reference_resolver.resolve_line('@@meta\n', 'docs/guide.md', 1), 'use @@greet\n')
        self.assertEqual(reference_resolver.resolve_line('@@backslash', 'docs/guide.md', 1), r'a\1\g<0>b')

    def test_resolve_pattern(self):
        reference_resolver = build_resolver()
        self.assertEqual(reference_resolver.resolve_line('@*[0-9]\n', 'docs/guide.md', 1), 'A1\nA2\nB1\n')
        self.assertEqual(reference_resolver.resolve_line('@* ^a\n', 'docs/guide.md', 1), 'A1\nA2\n')
        self.assertEqual(reference_resolver.resolve_line('x @*^zzz y\n', 'docs/guide.md', 1), 'x  y\n')

    def test_resolve_pattern_followed_by_punctuation(self):
        reference_resolver = build_resolver()
        self.assertEqual(reference_resolver.resolve_line('See (@*^a1 ).\n', 'docs/guide.md', 1), 'See (A1 ).\n')

        with self.assertRaises(MalformedReferenceException) as context:
            reference_resolver.resolve_line('See (@*^a1).\n', 'docs/guide.md', 1)
        self.assertIn('invalid pattern `^a1).`', context.exception.message)

    def test_resolve_metadata(self):
        reference_resolver = build_resolver()
        self.assertEqual(reference_resolver.resolve_line('@?greet.file', 'docs/guide.md', 1), 'src/hello.py')
        self.assertEqual(reference_resolver.resolve_line('@?greet.line', 'docs/guide.md', 1), '2')
        self.assertEqual(reference_resolver.resolve_line('@?greet.col', 'docs/guide.md', 1), '0')
        self.assertEqual(reference_resolver.resolve_line('@?greet.loc', 'docs/guide.md', 1), 'src/hello.py (2:0)')
        self.assertEqual(reference_resolver.resolve_line('@?greet.relpath', 'docs/guide.md', 1),
                         '../src/hello.py')
        self.assertEqual(reference_resolver.resolve_line('@?greet.relpath', 'README.md', 1), 'src/hello.py')
        self.assertEqual(reference_resolver.resolve_line('@?greet.abspath', 'docs/guide.md', 1), '/src/hello.py')
        self.assertEqual(reference_resolver.resolve_line('@?greet.LINE', 'docs/guide.md', 1), '2')
        self.assertEqual(
            reference_resolver.resolve_line('See @?greet.line:@?greet.col.\n', 'docs/guide.md', 1),
            'See 2:0.\n',
        )

    def test_resolve_missing_fragment(self):
        reference_resolver = build_resolver()

        with self.assertRaises(FragmentNotFoundException) as context:
            reference_resolver.resolve_line('ok @@nope\n', 'docs/guide.md', 4)
        self.assertEqual(context.exception.fragment_id, 'nope')
        self.assertEqual(context.exception.file_name, 'docs/guide.md')
        self.assertEqual(context.exception.line_number, 4)
        self.assertEqual(context.exception.column_number, 3)

        with self.assertRaises(FragmentNotFoundException):
            reference_resolver.resolve_line('@?nope.loc\n', 'docs/guide.md', 1)

    def test_resolve_invalid_metadata_field(self):
        reference_resolver = build_resolver()

        with self.assertRaises(InvalidMetadataFieldException) as context:
            reference_resolver.resolve_line('@?greet.foo\n', 'docs/guide.md', 3)
        self.assertEqual(context.exception.field, 'foo')
        self.assertEqual(context.exception.line_number, 3)
        self.assertEqual(context.exception.column_number, 8)
        self.assertIn('expected one of file, line, col, loc, relpath, abspath', context.exception.message)
        self.assertIsInstance(context.exception, WeaveException)

    def test_resolve_malformed_references(self):
        reference_resolver = build_resolver()
        lines = [
            '@@ alone\n',
            '@*\n',
            '@*(unclosed\n',
            '@?greet\n',
            '@?greet. field\n',
            '@?.line\n',
        ]
        for line in lines:
            with self.assertRaises(MalformedReferenceException, msg=line):
                reference_resolver.resolve_line(line, 'docs/guide.md', 1)

    def test_resolve_with_other_symbols(self):
        reference_resolver = build_resolver(Symbols(insertion='%%', pattern='%*', metadata='%?'))
        self.assertEqual(reference_resolver.resolve_line('@@greet\n', 'docs/guide.md', 1), '@@greet\n')
        self.assertEqual(reference_resolver.resolve_line('%%greet\n', 'docs/guide.md', 1), 'print("hi")\n')
        self.assertEqual(reference_resolver.resolve_line('%?greet.line\n', 'docs/guide.md', 1), '2\n')

    def test_compute_metadata(self):
        fragment = Fragment('greet', 'src/hello.py', 2, 0, 'print("hi")')
        self.assertEqual(ReferenceResolver.compute_metadata(fragment, 'File', 'docs/guide.md', 1, 0), 'src/hello.py')
        with self.assertRaises(InvalidMetadataFieldException):
            ReferenceResolver.compute_metadata(fragment, 'content', 'docs/guide.md', 1, 0)


if __name__ == '__main__':
    unittest.main()
