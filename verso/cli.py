"""
# Verso: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.

Two programs are provided:
- `verso`, which extracts fragments from source files and writes them to standard output;
- `recto`, which reads fragments from standard input and weaves them into prose files.
"""

import argparse
import os
import sys
from typing import Optional

from verso._version import __version__
from verso.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE, PIPELINE_HINT
from verso.core import extract, weave
from verso.exceptions import ScanException, WeaveException
from verso.symbols import Symbols

VERSO_DESCRIPTION = '''
    Extract fragments from source files, writing them (as JSON) to standard output.
'''
RECTO_DESCRIPTION = '''
    Weave fragments read (as JSON) from standard input into prose files.
'''
SOURCE_FILE_NAME_HELP = '''
    name of source file to extract fragments from
'''
OUTPUT_DIRECTORY_HELP = '''
    directory under which woven prose files are written (mirroring their relative paths)
'''
PROSE_FILE_NAME_HELP = '''
    name of prose file to be woven
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints progress to standard error)
'''


def add_common_arguments(argument_parser: argparse.ArgumentParser):
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )


def parse_verso_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(prog='verso', description=VERSO_DESCRIPTION, epilog=PIPELINE_HINT,
                                              formatter_class=argparse.RawDescriptionHelpFormatter)
    add_common_arguments(argument_parser)
    argument_parser.add_argument(
        'source_file_names',
        default=[],
        help=SOURCE_FILE_NAME_HELP,
        metavar='source_file',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def parse_recto_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(prog='recto', description=RECTO_DESCRIPTION, epilog=PIPELINE_HINT,
                                              formatter_class=argparse.RawDescriptionHelpFormatter)
    add_common_arguments(argument_parser)
    argument_parser.add_argument(
        'output_directory',
        help=OUTPUT_DIRECTORY_HELP,
        metavar='output_directory',
    )
    argument_parser.add_argument(
        'prose_file_names',
        default=[],
        help=PROSE_FILE_NAME_HELP,
        metavar='prose_file',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def verso_main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_verso_arguments(arguments)
    symbols = Symbols.from_environment(os.environ)

    try:
        extract(parsed_arguments.source_file_names, sys.stdout, symbols, parsed_arguments.verbose_mode_enabled)
    except ScanException as scan_exception:
        print(f'error: {scan_exception}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def recto_main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_recto_arguments(arguments)
    symbols = Symbols.from_environment(os.environ)

    if sys.stdin is None or sys.stdin.isatty():
        print('error: expected fragments on standard input\n\n' + PIPELINE_HINT, file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    try:
        output_file_names = weave(parsed_arguments.output_directory, parsed_arguments.prose_file_names, sys.stdin,
                                  symbols, parsed_arguments.verbose_mode_enabled)
    except WeaveException as weave_exception:
        print(f'error: {weave_exception}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    for output_file_name in output_file_names:
        print(f'success: wrote to `{output_file_name}`')
