"""
# Verso: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Entry points for the two stages.

The stages are run as
````
extract(«source_file_names») --> «payload» --> weave(«output_root», «prose_file_names»)
````
where «payload» is written in full only once extraction has succeeded for every source file,
and is read in full (and decoded) before weaving produces any output.
Hence extraction failure implies weaving failure,
whether the stages are connected by a pipe or run in one process (see `extract_and_weave`).
"""

import io
import os
import sys
import tempfile
from typing import Iterable, Iterator, Optional, TextIO

from verso.exceptions import SourceReadException, WeaveIoException
from verso.extraction import build_fragment_collection
from verso.fragments import Fragment, FragmentStore
from verso.interchange import decode_fragments, encode_fragments
from verso.resolution import ReferenceResolver
from verso.symbols import Symbols
from verso.weaving import compute_output_file_name, weave_text


def read_source_file(source_file_name: str) -> str:
    try:
        with open(source_file_name, 'r', encoding='utf-8', newline='') as source_file:
            return source_file.read()
    except (OSError, UnicodeDecodeError) as read_error:
        raise SourceReadException(f'cannot read source file ({read_error})', source_file_name) from read_error


def read_sources(source_file_names: Iterable[str]) -> Iterator[tuple[str, str]]:
    for source_file_name in source_file_names:
        yield source_file_name, read_source_file(source_file_name)


def extract(source_file_names: Iterable[str], output_stream: TextIO, symbols: Optional[Symbols] = None,
            verbose_mode_enabled: bool = False) -> list[Fragment]:
    """
    Extract fragments from source files, writing the encoded payload to `output_stream`.

    Nothing is written unless every source file is extracted successfully.
    """
    if symbols is None:
        symbols = Symbols()

    fragments = build_fragment_collection(read_sources(source_file_names), symbols)

    if verbose_mode_enabled:
        for fragment in fragments:
            print(f'Extracted fragment `{fragment.id_}` from {fragment.compute_location()}', file=sys.stderr)

    output_stream.write(encode_fragments(fragments))
    output_stream.flush()

    return fragments


def read_prose_file(prose_file_name: str) -> str:
    try:
        with open(prose_file_name, 'r', encoding='utf-8', newline='') as prose_file:
            return prose_file.read()
    except (OSError, UnicodeDecodeError) as read_error:
        raise WeaveIoException(f'cannot read prose file ({read_error})', prose_file_name) from read_error


def write_output_file(output_file_name: str, woven_contents: str):
    try:
        output_directory = os.path.dirname(output_file_name)
        if output_directory != '':
            os.makedirs(output_directory, exist_ok=True)
        with open(output_file_name, 'w', encoding='utf-8', newline='') as output_file:
            output_file.write(woven_contents)
    except OSError as write_error:
        raise WeaveIoException(f'cannot write output file ({write_error})', output_file_name) from write_error


def write_output_files(output_root: str, woven_files: list[tuple[str, str]], verbose_mode_enabled: bool = False):
    """
    Write every woven file, or none of them.

    Files are first written to a staging directory under `output_root`,
    and moved into place only once all are staged and every destination directory exists.
    The staging directory is removed whether or not this succeeds.
    """
    staging_root = output_root or os.curdir

    try:
        os.makedirs(staging_root, exist_ok=True)
        with tempfile.TemporaryDirectory(prefix='.recto-', dir=staging_root) as staging_directory:
            staged_files: list[tuple[str, str]] = []
            for output_file_name, woven_contents in woven_files:
                staged_file_name = os.path.join(staging_directory, os.path.relpath(output_file_name, staging_root))
                write_output_file(staged_file_name, woven_contents)
                staged_files.append((staged_file_name, output_file_name))

            for _, output_file_name in staged_files:
                os.makedirs(os.path.dirname(output_file_name), exist_ok=True)

            for staged_file_name, output_file_name in staged_files:
                if verbose_mode_enabled:
                    print(f'Writing `{output_file_name}`', file=sys.stderr)

                os.replace(staged_file_name, output_file_name)
    except OSError as write_error:
        raise WeaveIoException(f'cannot write output files ({write_error})', output_root) from write_error


def read_fragment_source(fragment_source: TextIO) -> str:
    try:
        return fragment_source.read()
    except (OSError, UnicodeDecodeError) as read_error:
        raise WeaveIoException(f'cannot read fragment payload ({read_error})') from read_error


def weave(output_root: str, prose_file_names: Iterable[str], fragment_source: TextIO,
          symbols: Optional[Symbols] = None, verbose_mode_enabled: bool = False) -> list[str]:
    """
    Weave prose files with the fragments read from `fragment_source`, returning the output file names.

    `fragment_source` is read to completion and decoded before anything else happens.
    Every prose file is then woven in memory, and output files are put in place only if all are written.
    """
    if symbols is None:
        symbols = Symbols()

    fragments = decode_fragments(read_fragment_source(fragment_source))
    fragment_store = FragmentStore(fragments)

    if verbose_mode_enabled:
        for fragment in fragments:
            print(f'Read fragment `{fragment.id_}`', file=sys.stderr)

    reference_resolver = ReferenceResolver(fragment_store, symbols)

    woven_files: list[tuple[str, str]] = []
    for prose_file_name in prose_file_names:
        output_file_name = compute_output_file_name(output_root, prose_file_name)

        if verbose_mode_enabled:
            print(f'Expanding references in `{prose_file_name}`', file=sys.stderr)

        contents = read_prose_file(prose_file_name)
        woven_files.append((output_file_name, weave_text(contents, prose_file_name, reference_resolver)))

    write_output_files(output_root, woven_files, verbose_mode_enabled)

    return [output_file_name for output_file_name, _ in woven_files]


def extract_and_weave(source_file_names: Iterable[str], output_root: str, prose_file_names: Iterable[str],
                      symbols: Optional[Symbols] = None, verbose_mode_enabled: bool = False) -> list[str]:
    """
    Run both stages in one process, connected by a fully buffered payload.
    """
    payload_buffer = io.StringIO()
    extract(source_file_names, payload_buffer, symbols, verbose_mode_enabled)
    payload_buffer.seek(0)

    return weave(output_root, prose_file_names, payload_buffer, symbols, verbose_mode_enabled)
