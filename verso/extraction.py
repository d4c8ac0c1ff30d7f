"""
# Verso: extraction.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Extraction of fragments from source file contents.

Besides the fragments delimited by markers, every file yields a whole-file fragment,
whose identifier is the file name with characters not allowed in identifiers replaced by `_`
(e.g. `test/example-2.py` yields `test/example-2_py`).
The whole-file fragment is the verbatim text of the file up to (but excluding) any halt marker line;
other marker lines are kept. Nothing after a halt marker appears in any fragment.
"""

from typing import Iterable, Optional

from verso.exceptions import DuplicateIdException
from verso.fragments import Fragment
from verso.markers import sanitise_id
from verso.matcher import FragmentSpan, match_spans
from verso.symbols import Symbols
from verso.utilities import strip_final_line_terminator


def capture_content(lines: list[str], span: FragmentSpan, marker_line_numbers: set[int]) -> str:
    captured_lines = [
        lines[line_number - 1]
        for line_number in range(span.open_line_number + 1, span.close_line_number)
        if line_number not in marker_line_numbers
    ]

    return strip_final_line_terminator(''.join(captured_lines))


def build_whole_file_fragment(lines: list[str], file_name: str, halt_line_number: Optional[int] = None) -> Fragment:
    if halt_line_number is not None:
        lines = lines[:halt_line_number - 1]

    return Fragment(
        id_=sanitise_id(file_name),
        file=file_name,
        line=1,
        col=0,
        content=strip_final_line_terminator(''.join(lines)),
    )


def extract_fragments(contents: str, file_name: str, symbols: Symbols) -> list[Fragment]:
    """
    Extract the fragments of one file, followed by its whole-file fragment.
    """
    lines, spans, marker_line_numbers, halt_line_number = match_spans(contents, file_name, symbols)

    fragments = [
        Fragment(
            id_=span.id_,
            file=span.file_name,
            line=span.line_number,
            col=span.column_number,
            content=capture_content(lines, span, marker_line_numbers),
        )
        for span in spans
    ]
    fragments.append(build_whole_file_fragment(lines, file_name, halt_line_number))

    return fragments


def verify_unique_ids(fragments: Iterable[Fragment]):
    fragment_from_id: dict[str, Fragment] = {}

    for fragment in fragments:
        try:
            existing_fragment = fragment_from_id[fragment.id_]
        except KeyError:
            fragment_from_id[fragment.id_] = fragment
            continue

        raise DuplicateIdException(
            fragment.id_,
            existing_fragment.compute_location(),
            fragment.compute_location(),
            fragment.file, fragment.line, fragment.col,
        )


def build_fragment_collection(sources: Iterable[tuple[str, str]], symbols: Symbols) -> list[Fragment]:
    """
    Build the fragment collection for `(file_name, contents)` pairs, in the order given.

    Any ScanException aborts the whole collection; there is no partial result.
    """
    fragments: list[Fragment] = []
    for file_name, contents in sources:
        fragments.extend(extract_fragments(contents, file_name, symbols))

    verify_unique_ids(fragments)

    return fragments
