"""
# Verso: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.

`ScanException` and its subclasses are raised while extracting fragments from source files;
`WeaveException` and its subclasses are raised while weaving prose files.
Either kind aborts the whole run.
"""

from typing import Optional

from verso.constants import METADATA_FIELDS


class VersoException(Exception):
    """
    Base class for an error carrying (at most) a file name, line number and column number.
    """
    _message: str
    _file_name: Optional[str]
    _line_number: Optional[int]
    _column_number: Optional[int]

    def __init__(self, message: str, file_name: Optional[str] = None,
                 line_number: Optional[int] = None, column_number: Optional[int] = None):
        super().__init__(message)
        self._message = message
        self._file_name = file_name
        self._line_number = line_number
        self._column_number = column_number

    @property
    def message(self) -> str:
        return self._message

    @property
    def file_name(self) -> Optional[str]:
        return self._file_name

    @property
    def line_number(self) -> Optional[int]:
        return self._line_number

    @property
    def column_number(self) -> Optional[int]:
        return self._column_number

    def __str__(self) -> str:
        location_parts = []
        if self._file_name is not None:
            location_parts.append(f'`{self._file_name}`')
        if self._line_number is not None:
            location_parts.append(f'line {self._line_number}')
        if self._column_number is not None:
            location_parts.append(f'column {self._column_number}')

        if len(location_parts) == 0:
            return self._message

        return f'{", ".join(location_parts)}: {self._message}'


class ScanException(VersoException):
    pass


class MissingIdException(ScanException):
    pass


class InvalidIdCharacterException(ScanException):
    _character: str

    def __init__(self, character: str, file_name: str, line_number: int, column_number: int):
        super().__init__(f'reserved character `{character}` used in fragment identifier',
                         file_name, line_number, column_number)
        self._character = character

    @property
    def character(self) -> str:
        return self._character


class UnterminatedFragmentException(ScanException):
    _fragment_id: str

    def __init__(self, fragment_id: str, message: str, file_name: str, line_number: int, column_number: int):
        super().__init__(message, file_name, line_number, column_number)
        self._fragment_id = fragment_id

    @property
    def fragment_id(self) -> str:
        return self._fragment_id


class UnmatchedCloseException(ScanException):
    _fragment_id: Optional[str]

    def __init__(self, fragment_id: Optional[str], message: str, file_name: str, line_number: int,
                 column_number: int):
        super().__init__(message, file_name, line_number, column_number)
        self._fragment_id = fragment_id

    @property
    def fragment_id(self) -> Optional[str]:
        return self._fragment_id


class DuplicateIdException(ScanException):
    _fragment_id: str
    _first_location: str
    _second_location: str

    def __init__(self, fragment_id: str, first_location: str, second_location: str,
                 file_name: str, line_number: int, column_number: int):
        super().__init__(
            f'fragment identifier `{fragment_id}` defined at both {first_location} and {second_location}',
            file_name, line_number, column_number,
        )
        self._fragment_id = fragment_id
        self._first_location = first_location
        self._second_location = second_location

    @property
    def fragment_id(self) -> str:
        return self._fragment_id

    @property
    def first_location(self) -> str:
        return self._first_location

    @property
    def second_location(self) -> str:
        return self._second_location


class SourceReadException(ScanException):
    pass


class WeaveException(VersoException):
    pass


class FragmentNotFoundException(WeaveException):
    _fragment_id: str

    def __init__(self, fragment_id: str, file_name: str, line_number: int, column_number: int):
        super().__init__(f'no fragment found with identifier `{fragment_id}`', file_name, line_number, column_number)
        self._fragment_id = fragment_id

    @property
    def fragment_id(self) -> str:
        return self._fragment_id


class InvalidMetadataFieldException(WeaveException):
    _field: str

    def __init__(self, field: str, file_name: str, line_number: int, column_number: int):
        super().__init__(f'unknown metadata field `{field}` (expected one of {", ".join(METADATA_FIELDS)})',
                         file_name, line_number, column_number)
        self._field = field

    @property
    def field(self) -> str:
        return self._field


class MalformedReferenceException(WeaveException):
    pass


class MalformedInterchangePayloadException(WeaveException):
    pass


class WeaveIoException(WeaveException):
    pass


class IdExtractionException(Exception):
    """
    Raised when an identifier cannot be extracted following a marker symbol.

    `character` is the first reserved character encountered,
    or None if the identifier is missing altogether.
    """
    _character: Optional[str]
    _column_number: int

    def __init__(self, character: Optional[str], column_number: int):
        self._character = character
        self._column_number = column_number

    @property
    def character(self) -> Optional[str]:
        return self._character

    @property
    def column_number(self) -> int:
        return self._column_number
