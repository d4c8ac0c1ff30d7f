"""
# Verso: matcher.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Matching of open and close markers into fragment spans.

Fragments may nest, but must close in the reverse order of opening.
A close marker naming an identifier asserts which fragment it closes;
it does not reach past the innermost open fragment.
"""

from typing import NamedTuple, Optional

from verso.exceptions import (
    IdExtractionException,
    InvalidIdCharacterException,
    MissingIdException,
    UnmatchedCloseException,
    UnterminatedFragmentException,
)
from verso.markers import CloseMarker, HaltMarker, Marker, OpenMarker, compute_marker
from verso.symbols import Symbols
from verso.utilities import split_lines


class FragmentSpan(NamedTuple):
    """
    A finalised fragment span.

    The captured lines are those strictly between `open_line_number` and `close_line_number`,
    less any marker lines.
    """
    id_: str
    file_name: str
    line_number: int
    column_number: int
    open_line_number: int
    close_line_number: int


class SpanMatchResult(NamedTuple):
    """
    The result of matching a file.

    `halt_line_number` is the number of the line carrying the halt marker, or None if scanning reached the end.
    """
    lines: list[str]
    spans: list['FragmentSpan']
    marker_line_numbers: set[int]
    halt_line_number: Optional[int]


class OpenEntry(NamedTuple):
    id_: str
    open_line_number: int
    column_number: int


def compute_line_marker(line: str, file_name: str, line_number: int, symbols: Symbols) -> Optional[Marker]:
    try:
        return compute_marker(line, symbols)
    except IdExtractionException as id_extraction_exception:
        character = id_extraction_exception.character
        column_number = id_extraction_exception.column_number
        if character is None:
            raise MissingIdException('no fragment identifier found after fragment open symbol',
                                     file_name, line_number, column_number)
        raise InvalidIdCharacterException(character, file_name, line_number, column_number)


def close_entry(open_stack: list['OpenEntry'], close_marker: CloseMarker,
                file_name: str, line_number: int) -> 'OpenEntry':
    if len(open_stack) == 0:
        raise UnmatchedCloseException(close_marker.id_, 'fragment close symbol found without an open fragment',
                                      file_name, line_number, close_marker.column_number)

    innermost_entry = open_stack[-1]
    if close_marker.id_ is not None and close_marker.id_ != innermost_entry.id_:
        if any(entry.id_ == close_marker.id_ for entry in open_stack):
            message = (
                f'fragment close symbol names `{close_marker.id_}`, '
                f'but the innermost open fragment is `{innermost_entry.id_}`'
            )
        else:
            message = f'fragment close symbol names `{close_marker.id_}`, which is not open'
        raise UnmatchedCloseException(close_marker.id_, message, file_name, line_number, close_marker.column_number)

    return open_stack.pop()


def match_spans(contents: str, file_name: str, symbols: Symbols) -> 'SpanMatchResult':
    """
    Match the markers of a file into fragment spans.

    Spans are emitted in the order their fragments close (innermost first).
    Scanning stops at a halt marker; lines after it are never inspected.
    """
    lines = split_lines(contents)
    spans: list['FragmentSpan'] = []
    marker_line_numbers: set[int] = set()
    open_stack: list['OpenEntry'] = []
    halt_line_number: Optional[int] = None
    line_number = 0

    for line_number, line in enumerate(lines, start=1):
        marker = compute_line_marker(line, file_name, line_number, symbols)
        if marker is None:
            continue

        marker_line_numbers.add(line_number)

        if isinstance(marker, OpenMarker):
            open_stack.append(OpenEntry(marker.id_, line_number, 0))
            continue

        if isinstance(marker, CloseMarker):
            entry = close_entry(open_stack, marker, file_name, line_number)
            spans.append(
                FragmentSpan(
                    id_=entry.id_,
                    file_name=file_name,
                    line_number=entry.open_line_number + 1,
                    column_number=entry.column_number,
                    open_line_number=entry.open_line_number,
                    close_line_number=line_number,
                )
            )
            continue

        if isinstance(marker, HaltMarker):
            if len(open_stack) > 0:
                raise UnterminatedFragmentException(
                    open_stack[-1].id_,
                    f'halt symbol found while fragment `{open_stack[-1].id_}` is open',
                    file_name, line_number, marker.column_number,
                )
            halt_line_number = line_number
            break

    if len(open_stack) > 0:
        innermost_entry = open_stack[-1]
        raise UnterminatedFragmentException(
            innermost_entry.id_,
            f'fragment `{innermost_entry.id_}` (opened on line {innermost_entry.open_line_number}) is never closed',
            file_name, line_number, 0,
        )

    return SpanMatchResult(lines, spans, marker_line_numbers, halt_line_number)
