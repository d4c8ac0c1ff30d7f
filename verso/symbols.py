"""
# Verso: symbols.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Marker and reference symbol configuration.
"""

from typing import Mapping

from verso.constants import (
    DEFAULT_FRAGMENT_CLOSE_SYMBOL,
    DEFAULT_FRAGMENT_OPEN_SYMBOL,
    DEFAULT_HALT_SYMBOL,
    DEFAULT_INSERTION_SYMBOL,
    DEFAULT_METADATA_SYMBOL,
    DEFAULT_PATTERN_SYMBOL,
    FRAGMENT_CLOSE_SYMBOL_VARIABLE,
    FRAGMENT_OPEN_SYMBOL_VARIABLE,
    HALT_SYMBOL_VARIABLE,
    INSERTION_SYMBOL_VARIABLE,
    METADATA_SYMBOL_VARIABLE,
    PATTERN_SYMBOL_VARIABLE,
)


class Symbols:
    """
    The six symbols recognised in source and prose files.

    - `fragment_open`, `fragment_close` and `halt` are used when extracting fragments from source files.
    - `insertion`, `pattern` and `metadata` are used when weaving prose files.

    Both stages of a run should be given equal symbols.
    A mismatch is not an error: tokens written with unconfigured symbols are simply left as they are.
    """
    _fragment_open: str
    _fragment_close: str
    _halt: str
    _insertion: str
    _pattern: str
    _metadata: str

    def __init__(self,
                 fragment_open: str = DEFAULT_FRAGMENT_OPEN_SYMBOL,
                 fragment_close: str = DEFAULT_FRAGMENT_CLOSE_SYMBOL,
                 halt: str = DEFAULT_HALT_SYMBOL,
                 insertion: str = DEFAULT_INSERTION_SYMBOL,
                 pattern: str = DEFAULT_PATTERN_SYMBOL,
                 metadata: str = DEFAULT_METADATA_SYMBOL):
        for name, value in [
            ('fragment_open', fragment_open),
            ('fragment_close', fragment_close),
            ('halt', halt),
            ('insertion', insertion),
            ('pattern', pattern),
            ('metadata', metadata),
        ]:
            if len(value) == 0:
                raise ValueError(f'error: symbol `{name}` cannot be empty')

        self._fragment_open = fragment_open
        self._fragment_close = fragment_close
        self._halt = halt
        self._insertion = insertion
        self._pattern = pattern
        self._metadata = metadata

    @property
    def fragment_open(self) -> str:
        return self._fragment_open

    @property
    def fragment_close(self) -> str:
        return self._fragment_close

    @property
    def halt(self) -> str:
        return self._halt

    @property
    def insertion(self) -> str:
        return self._insertion

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def metadata(self) -> str:
        return self._metadata

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbols):
            return NotImplemented

        return self._as_tuple() == other._as_tuple()

    def __hash__(self) -> int:
        return hash(self._as_tuple())

    def __repr__(self) -> str:
        return (
            f'Symbols(fragment_open={self._fragment_open!r}, fragment_close={self._fragment_close!r}, '
            f'halt={self._halt!r}, insertion={self._insertion!r}, pattern={self._pattern!r}, '
            f'metadata={self._metadata!r})'
        )

    def _as_tuple(self) -> tuple[str, ...]:
        return (
            self._fragment_open,
            self._fragment_close,
            self._halt,
            self._insertion,
            self._pattern,
            self._metadata,
        )

    @staticmethod
    def from_environment(environment: Mapping[str, str]) -> 'Symbols':
        """
        Build symbols from environment variables, falling back to the defaults for unset (or empty) variables.
        """
        return Symbols(
            fragment_open=environment.get(FRAGMENT_OPEN_SYMBOL_VARIABLE) or DEFAULT_FRAGMENT_OPEN_SYMBOL,
            fragment_close=environment.get(FRAGMENT_CLOSE_SYMBOL_VARIABLE) or DEFAULT_FRAGMENT_CLOSE_SYMBOL,
            halt=environment.get(HALT_SYMBOL_VARIABLE) or DEFAULT_HALT_SYMBOL,
            insertion=environment.get(INSERTION_SYMBOL_VARIABLE) or DEFAULT_INSERTION_SYMBOL,
            pattern=environment.get(PATTERN_SYMBOL_VARIABLE) or DEFAULT_PATTERN_SYMBOL,
            metadata=environment.get(METADATA_SYMBOL_VARIABLE) or DEFAULT_METADATA_SYMBOL,
        )
