"""
# Verso: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2

DEFAULT_FRAGMENT_OPEN_SYMBOL = '@<'
DEFAULT_FRAGMENT_CLOSE_SYMBOL = '>@'
DEFAULT_HALT_SYMBOL = '@!halt'
DEFAULT_INSERTION_SYMBOL = '@@'
DEFAULT_PATTERN_SYMBOL = '@*'
DEFAULT_METADATA_SYMBOL = '@?'

FRAGMENT_OPEN_SYMBOL_VARIABLE = 'VERSO_FRAGMENT_OPEN_SYMBOL'
FRAGMENT_CLOSE_SYMBOL_VARIABLE = 'VERSO_FRAGMENT_CLOSE_SYMBOL'
HALT_SYMBOL_VARIABLE = 'VERSO_HALT_SYMBOL'
INSERTION_SYMBOL_VARIABLE = 'RECTO_INSERTION_SYMBOL'
PATTERN_SYMBOL_VARIABLE = 'RECTO_PATTERN_SYMBOL'
METADATA_SYMBOL_VARIABLE = 'RECTO_METADATA_SYMBOL'

ID_SAFE_CHARACTERS = '/_-'
ID_REPLACEMENT_CHARACTER = '_'
METADATA_SEPARATOR = '.'

FILE_FIELD = 'file'
LINE_FIELD = 'line'
COLUMN_FIELD = 'col'
LOCATION_FIELD = 'loc'
RELATIVE_PATH_FIELD = 'relpath'
ABSOLUTE_PATH_FIELD = 'abspath'
METADATA_FIELDS = (
    FILE_FIELD,
    LINE_FIELD,
    COLUMN_FIELD,
    LOCATION_FIELD,
    RELATIVE_PATH_FIELD,
    ABSOLUTE_PATH_FIELD,
)

PATTERN_JOIN_SEPARATOR = '\n'

PIPELINE_HINT = '''\
verso and recto are meant to be used together, like this:

    verso main.rs lib.rs | recto build chap1.tex chap2.tex blog/home.md
    #     ^       ^              ^     ^         ^         ^
    #     +-------+              |     +---------+---------+
    #     |                      |                         |
    #     +--- Source files      +--- Output directory     +--- Prose files
'''
