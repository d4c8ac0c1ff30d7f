"""
# Verso: test_symbols.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `symbols.py`.
"""

import unittest

from verso.symbols import Symbols


class TestSymbols(unittest.TestCase):
    def test_defaults(self):
        symbols = Symbols()
        self.assertEqual(symbols.fragment_open, '@<')
        self.assertEqual(symbols.fragment_close, '>@')
        self.assertEqual(symbols.halt, '@!halt')
        self.assertEqual(symbols.insertion, '@@')
        self.assertEqual(symbols.pattern, '@*')
        self.assertEqual(symbols.metadata, '@?')

    def test_empty_symbol_rejected(self):
        with self.assertRaises(ValueError):
            Symbols(insertion='')
        with self.assertRaises(ValueError):
            Symbols(fragment_close='')

    def test_equality(self):
        self.assertEqual(Symbols(), Symbols())
        self.assertEqual(hash(Symbols()), hash(Symbols()))
        self.assertNotEqual(Symbols(), Symbols(pattern='%*'))

    def test_from_environment(self):
        self.assertEqual(Symbols.from_environment({}), Symbols())
        self.assertEqual(Symbols.from_environment({'RECTO_INSERTION_SYMBOL': ''}), Symbols())
        self.assertEqual(Symbols.from_environment({'UNRELATED': 'x'}), Symbols())
        self.assertEqual(
            Symbols.from_environment({
                'VERSO_FRAGMENT_OPEN_SYMBOL': '<<<',
                'VERSO_FRAGMENT_CLOSE_SYMBOL': '>>>',
                'VERSO_HALT_SYMBOL': '!!!',
                'RECTO_INSERTION_SYMBOL': '%%',
                'RECTO_PATTERN_SYMBOL': '%*',
                'RECTO_METADATA_SYMBOL': '%?',
            }),
            Symbols(
                fragment_open='<<<',
                fragment_close='>>>',
                halt='!!!',
                insertion='%%',
                pattern='%*',
                metadata='%?',
            ),
        )

        symbols = Symbols.from_environment({'RECTO_METADATA_SYMBOL': '$?'})
        self.assertEqual(symbols.metadata, '$?')
        self.assertEqual(symbols.insertion, '@@')


if __name__ == '__main__':
    unittest.main()
