"""
# Verso: resolution.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Resolution of reference tokens in prose lines.
"""

import re

from verso.constants import (
    ABSOLUTE_PATH_FIELD,
    COLUMN_FIELD,
    FILE_FIELD,
    LINE_FIELD,
    LOCATION_FIELD,
    PATTERN_JOIN_SEPARATOR,
    RELATIVE_PATH_FIELD,
)
from verso.exceptions import (
    FragmentNotFoundException,
    InvalidMetadataFieldException,
    MalformedReferenceException,
)
from verso.fragments import Fragment, FragmentStore
from verso.markers import (
    DirectReference,
    MetadataReference,
    PatternReference,
    compile_reference_regex,
    extract_reference,
)
from verso.symbols import Symbols
from verso.utilities import compute_relative_path, compute_rooted_path


class ReferenceResolver:
    """
    Object substituting reference tokens in prose lines with fragment content or metadata.

    - Direct references are replaced by the content of the fragment.
    - Pattern references are replaced by the contents of every fragment whose identifier is searched by the regex,
      in lexicographic order of identifier, joined by a newline.
      No matching fragments means an empty replacement.
    - Metadata references are replaced by the value of a field of the fragment.

    Text surrounding a token is left in place, so that multi-line content may be spliced mid-line.
    Substituted text is never rescanned for tokens.
    """
    _fragment_store: 'FragmentStore'
    _reference_regex_compiled: re.Pattern

    def __init__(self, fragment_store: FragmentStore, symbols: Symbols):
        self._fragment_store = fragment_store
        self._reference_regex_compiled = compile_reference_regex(symbols)

    @property
    def fragment_store(self) -> 'FragmentStore':
        return self._fragment_store

    def resolve_line(self, line: str, prose_file_name: str, line_number: int) -> str:
        def substitute(reference_match: re.Match) -> str:
            return self.resolve_reference(reference_match, prose_file_name, line_number)

        return self._reference_regex_compiled.sub(substitute, line)

    def resolve_reference(self, reference_match: re.Match, prose_file_name: str, line_number: int) -> str:
        reference = extract_reference(reference_match)
        column_number = reference_match.start()

        if isinstance(reference, DirectReference):
            fragment = self.load_fragment(reference.id_, prose_file_name, line_number, column_number)
            return fragment.content

        if isinstance(reference, PatternReference):
            return self.resolve_pattern(reference.regex, prose_file_name, line_number, column_number)

        if isinstance(reference, MetadataReference):
            if reference.field is None or reference.field == '':
                raise MalformedReferenceException(
                    f'expected `.«field»` after identifier in metadata reference `{reference_match.group()}`',
                    prose_file_name, line_number, column_number,
                )
            fragment = self.load_fragment(reference.id_, prose_file_name, line_number, column_number)
            field_column_number = reference_match.start('metadata_field')
            return ReferenceResolver.compute_metadata(fragment, reference.field, prose_file_name,
                                                      line_number, field_column_number)

        raise TypeError(f'error: unrecognised reference {reference!r}')

    def load_fragment(self, id_: str, prose_file_name: str, line_number: int, column_number: int) -> 'Fragment':
        if id_ == '':
            raise MalformedReferenceException('no fragment identifier found after reference symbol',
                                              prose_file_name, line_number, column_number)

        fragment = self._fragment_store.load(id_)
        if fragment is None:
            raise FragmentNotFoundException(id_, prose_file_name, line_number, column_number)

        return fragment

    def resolve_pattern(self, regex: str, prose_file_name: str, line_number: int, column_number: int) -> str:
        if regex == '':
            raise MalformedReferenceException('no pattern found after pattern symbol',
                                              prose_file_name, line_number, column_number)

        try:
            regex_compiled = re.compile(regex)
        except re.error as regex_error:
            raise MalformedReferenceException(f'invalid pattern `{regex}` ({regex_error})',
                                              prose_file_name, line_number, column_number) from regex_error

        return PATTERN_JOIN_SEPARATOR.join(
            self._fragment_store.load(id_).content
            for id_ in self._fragment_store.compute_ids(regex_compiled)
        )

    @staticmethod
    def compute_metadata(fragment: Fragment, field: str, prose_file_name: str,
                         line_number: int, column_number: int) -> str:
        normalised_field = field.lower()

        if normalised_field == FILE_FIELD:
            return fragment.file

        if normalised_field == LINE_FIELD:
            return str(fragment.line)

        if normalised_field == COLUMN_FIELD:
            return str(fragment.col)

        if normalised_field == LOCATION_FIELD:
            return fragment.compute_location()

        if normalised_field == RELATIVE_PATH_FIELD:
            return compute_relative_path(prose_file_name, fragment.file)

        if normalised_field == ABSOLUTE_PATH_FIELD:
            return compute_rooted_path(fragment.file)

        raise InvalidMetadataFieldException(field, prose_file_name, line_number, column_number)
