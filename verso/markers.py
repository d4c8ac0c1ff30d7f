"""
# Verso: markers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Grammar of markers (in source files) and reference tokens (in prose files).

Markers, with default symbols:
````
«anything» @<«id» «anything»        (open)
«anything» >@[«id»] «anything»      (close)
«anything» @!halt «anything»        (halt)
````
A line carries at most one marker, recognised in the order open, close, halt.

Reference tokens, with default symbols, any number of which may appear anywhere in a line:
````
@@«id»                  (direct)
@*[«whitespace»]«regex» (pattern)
@?«id».«field»          (metadata)
````
Identifiers consist of letters, digits, `/`, `_` and `-`; `.` is reserved.
A pattern runs to the next whitespace character, so punctuation written directly after it becomes part of it
(`(@*^a)` compiles `^a)`). Follow a pattern with whitespace before any closing punctuation.
Column numbers are zero-based.
"""

import re
from typing import NamedTuple, Optional, Union

from verso.constants import ID_REPLACEMENT_CHARACTER, ID_SAFE_CHARACTERS, METADATA_SEPARATOR
from verso.exceptions import IdExtractionException
from verso.symbols import Symbols


ID_CHARACTER_REGEX = r'[\w/-]'


class OpenMarker(NamedTuple):
    id_: str
    column_number: int


class CloseMarker(NamedTuple):
    id_: Optional[str]
    column_number: int


class HaltMarker(NamedTuple):
    column_number: int


Marker = Union[OpenMarker, CloseMarker, HaltMarker]


class DirectReference(NamedTuple):
    id_: str


class PatternReference(NamedTuple):
    regex: str


class MetadataReference(NamedTuple):
    id_: str
    field: Optional[str]


Reference = Union[DirectReference, PatternReference, MetadataReference]


def is_id_character(character: str) -> bool:
    return character.isalnum() or character in ID_SAFE_CHARACTERS


def sanitise_id(name: str) -> str:
    return ''.join(
        character if is_id_character(character) else ID_REPLACEMENT_CHARACTER
        for character in name
    )


def extract_id(line: str, start_index: int) -> Optional[str]:
    """
    Extract the identifier beginning at `start_index`.

    The identifier is the run of non-whitespace characters beginning at `start_index`.
    Returns None if that run is empty.
    Raises IdExtractionException at the first character not allowed in an identifier.
    """
    id_ = re.match(pattern=r'[\S]*', string=line[start_index:]).group()
    if id_ == '':
        return None

    for offset, character in enumerate(id_):
        if not is_id_character(character):
            raise IdExtractionException(character, start_index + offset)

    return id_


def compute_marker(line: str, symbols: Symbols) -> Optional[Marker]:
    """
    Compute the marker (if any) carried by a line.

    Raises IdExtractionException for an open marker whose identifier is missing or invalid,
    or for a close marker whose (optional) identifier is invalid.
    """
    open_index = line.find(symbols.fragment_open)
    if open_index >= 0:
        id_ = extract_id(line, open_index + len(symbols.fragment_open))
        if id_ is None:
            raise IdExtractionException(None, open_index)

        return OpenMarker(id_, open_index)

    close_index = line.find(symbols.fragment_close)
    if close_index >= 0:
        id_ = extract_id(line, close_index + len(symbols.fragment_close))
        return CloseMarker(id_, close_index)

    halt_index = line.find(symbols.halt)
    if halt_index >= 0:
        return HaltMarker(halt_index)

    return None


def build_reference_regex(symbols: Symbols) -> str:
    """
    Build the regex matching any one reference token.

    Alternatives are ordered longest symbol first,
    so that a symbol which is a prefix of another does not shadow it.
    """
    symbol_alternative_pairs = [
        (
            symbols.insertion,
            rf'(?P<direct> {re.escape(symbols.insertion)} (?P<direct_id> {ID_CHARACTER_REGEX}* ) )',
        ),
        (
            symbols.pattern,
            rf'(?P<pattern> {re.escape(symbols.pattern)} [^\S\n]* (?P<pattern_regex> [\S]* ) )',
        ),
        (
            symbols.metadata,
            rf'(?P<metadata> {re.escape(symbols.metadata)} (?P<metadata_id> {ID_CHARACTER_REGEX}* )'
            rf' (?: {re.escape(METADATA_SEPARATOR)} (?P<metadata_field> [^\W_]* ) )? )',
        ),
    ]
    symbol_alternative_pairs.sort(key=lambda pair: len(pair[0]), reverse=True)

    return ' | '.join(alternative for _, alternative in symbol_alternative_pairs)


def compile_reference_regex(symbols: Symbols) -> re.Pattern:
    return re.compile(pattern=build_reference_regex(symbols), flags=re.VERBOSE)


def extract_reference(reference_match: re.Match) -> Reference:
    if reference_match.group('direct') is not None:
        return DirectReference(reference_match.group('direct_id'))

    if reference_match.group('pattern') is not None:
        return PatternReference(reference_match.group('pattern_regex'))

    return MetadataReference(reference_match.group('metadata_id'), reference_match.group('metadata_field'))
