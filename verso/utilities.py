"""
# Verso: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import os
import re


def split_lines(string: str) -> list[str]:
    """
    Split a string into lines, keeping line terminators.

    Only `\\n` terminates a line (so that form feeds and the like survive as content).
    The last line is free of a terminator if the string does not end with one.
    """
    return re.findall(pattern=r'[^\n]* \n | [^\n]+', string=string, flags=re.VERBOSE)


def strip_final_line_terminator(string: str) -> str:
    return re.sub(pattern=r'\r? \n \Z', repl='', string=string, flags=re.VERBOSE)


def normalise_separators(path: str) -> str:
    return path.replace('\\', '/')


def compute_relative_path(from_file_name: str, to_file_name: str) -> str:
    """
    Compute the path of `to_file_name` relative to the directory containing `from_file_name`.
    """
    from_directory = os.path.dirname(from_file_name) or os.curdir
    relative_path = os.path.relpath(to_file_name, start=from_directory)

    return normalise_separators(relative_path)


def compute_rooted_path(file_name: str) -> str:
    """
    Compute the path of a file as seen from the working directory, rendered with a leading slash.

    For example, `./src/lib.rs` becomes `/src/lib.rs`.
    """
    rooted_path = normalise_separators(os.path.normpath(file_name))
    rooted_path = re.sub(pattern=r'\A [/]+', repl='', string=rooted_path, flags=re.VERBOSE)

    return f'/{rooted_path}'
