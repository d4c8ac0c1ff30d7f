"""
# Verso: fragments.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Fragments and the store used to look them up while weaving.
"""

import re
from typing import Iterable, NamedTuple, Optional


class Fragment(NamedTuple):
    """
    A named span of text captured from a source file.

    - `file` is the source file name exactly as supplied for extraction.
    - `line` is the (one-based) number of the first captured line.
    - `col` is always 0, since columns are not tracked beyond line starts.
    - `content` is the captured text with line terminators preserved,
      save for that of the final line.
    """
    id_: str
    file: str
    line: int
    col: int
    content: str

    def compute_location(self) -> str:
        return f'{self.file} ({self.line}:{self.col})'


class FragmentStore:
    """
    Read-only store of fragments, indexed by identifier.

    Identifiers are assumed unique (this is guaranteed by extraction, and checked when decoding).
    """
    _fragment_from_id: dict[str, 'Fragment']
    _sorted_ids: list[str]

    def __init__(self, fragments: Iterable['Fragment']):
        self._fragment_from_id = {
            fragment.id_: fragment
            for fragment in fragments
        }
        self._sorted_ids = sorted(self._fragment_from_id)

    def __len__(self) -> int:
        return len(self._fragment_from_id)

    def __contains__(self, id_: object) -> bool:
        return id_ in self._fragment_from_id

    def load(self, id_: str) -> Optional['Fragment']:
        return self._fragment_from_id.get(id_)

    def compute_ids(self, regex: Optional[re.Pattern] = None) -> list[str]:
        """
        Compute identifiers in lexicographic order, keeping only those searched by `regex` if given.
        """
        if regex is None:
            return list(self._sorted_ids)

        return [
            id_
            for id_ in self._sorted_ids
            if regex.search(id_) is not None
        ]
