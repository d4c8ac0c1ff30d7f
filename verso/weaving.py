"""
# Verso: weaving.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Weaving of prose file contents, and mirroring of prose file names under an output root.
"""

import os
import re

from verso.exceptions import WeaveIoException
from verso.resolution import ReferenceResolver
from verso.utilities import split_lines


def weave_text(contents: str, prose_file_name: str, reference_resolver: ReferenceResolver) -> str:
    """
    Resolve every reference in the contents of a prose file.

    Line terminators (including the presence or absence of a final one) are preserved exactly.
    """
    return ''.join(
        reference_resolver.resolve_line(line, prose_file_name, line_number)
        for line_number, line in enumerate(split_lines(contents), start=1)
    )


def compute_output_file_name(output_root: str, prose_file_name: str) -> str:
    """
    Compute the output file name mirroring `prose_file_name` under `output_root`.

    Leading separators (and any drive) are dropped, so that absolute prose file names are mirrored too.
    A prose file name escaping the output root (by way of `..`) is rejected.
    """
    _, relative_name = os.path.splitdrive(os.path.normpath(prose_file_name))
    relative_name = re.sub(pattern=r'\A [/\\]+', repl='', string=relative_name, flags=re.VERBOSE)

    if relative_name in ('', os.curdir) or relative_name == os.pardir or relative_name.startswith(os.pardir + os.sep):
        raise WeaveIoException(f'cannot mirror `{prose_file_name}` under output directory `{output_root}`',
                               prose_file_name)

    return os.path.join(output_root, relative_name)
