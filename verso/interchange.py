"""
# Verso: interchange.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Encoding and decoding of the payload passed from extraction to weaving.

The payload is a single JSON array of records:
````
[{"id": «id», "file": «file», "line": «line», "col": «col», "content": «content»}, ...]
````
Decoding is all or nothing: an empty, truncated or otherwise malformed payload is rejected outright,
so that a failed extraction can never be woven.
"""

import json
from typing import Iterable

import jsonschema

from verso.exceptions import MalformedInterchangePayloadException
from verso.fragments import Fragment


PAYLOAD_SCHEMA = {
    'type': 'array',
    'items': {
        'type': 'object',
        'properties': {
            'id': {'type': 'string'},
            'file': {'type': 'string'},
            'line': {'type': 'integer', 'minimum': 1},
            'col': {'type': 'integer', 'minimum': 0},
            'content': {'type': 'string'},
        },
        'required': ['id', 'file', 'line', 'col', 'content'],
        'additionalProperties': False,
    },
}


def encode_fragments(fragments: Iterable[Fragment]) -> str:
    records = [
        {
            'id': fragment.id_,
            'file': fragment.file,
            'line': fragment.line,
            'col': fragment.col,
            'content': fragment.content,
        }
        for fragment in fragments
    ]

    return json.dumps(records) + '\n'


def decode_fragments(payload: str) -> list[Fragment]:
    if payload.strip() == '':
        raise MalformedInterchangePayloadException('empty fragment payload (did extraction fail?)')

    try:
        records = json.loads(payload)
    except json.JSONDecodeError as json_decode_error:
        raise MalformedInterchangePayloadException(
            f'fragment payload is not valid JSON ({json_decode_error.msg} at position {json_decode_error.pos})'
        ) from json_decode_error

    try:
        jsonschema.validate(instance=records, schema=PAYLOAD_SCHEMA)
    except jsonschema.ValidationError as validation_error:
        raise MalformedInterchangePayloadException(
            f'fragment payload does not match schema: {validation_error.message}'
        ) from validation_error

    fragments: list[Fragment] = []
    seen_ids: set[str] = set()
    for record in records:
        for field in ('line', 'col'):
            if not isinstance(record[field], int):
                raise MalformedInterchangePayloadException(
                    f'fragment payload gives non-integer `{field}` {record[field]!r} for identifier `{record["id"]}`'
                )

        id_ = record['id']
        if id_ in seen_ids:
            raise MalformedInterchangePayloadException(f'fragment payload repeats identifier `{id_}`')
        seen_ids.add(id_)

        fragments.append(
            Fragment(
                id_=id_,
                file=record['file'],
                line=record['line'],
                col=record['col'],
                content=record['content'],
            )
        )

    return fragments
