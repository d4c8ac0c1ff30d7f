"""
# Verso: test_interchange.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `interchange.py`.
"""

import json
import unittest

import jsonschema

from verso.exceptions import MalformedInterchangePayloadException
from verso.fragments import Fragment
from verso.interchange import PAYLOAD_SCHEMA, decode_fragments, encode_fragments


class TestInterchange(unittest.TestCase):
    def test_encode_fragments(self):
        self.assertEqual(encode_fragments([]), '[]\n')
        self.assertEqual(
            encode_fragments([Fragment('greet', 'hello.py', 2, 0, 'print("hi")')]),
            '[{"id": "greet", "file": "hello.py", "line": 2, "col": 0, "content": "print(\\"hi\\")"}]\n',
        )

    def test_encoded_payload_matches_schema(self):
        payload = encode_fragments([Fragment('greet', 'hello.py', 2, 0, 'print("hi")')])
        jsonschema.validate(instance=json.loads(payload), schema=PAYLOAD_SCHEMA)

    def test_decode_fragments(self):
        fragments = [
            Fragment('greet', 'hello.py', 2, 0, 'print("hi")'),
            Fragment('multi', 'src/lib.rs', 10, 0, 'one\r\ntwo\n\tthree \\ "quoted"'),
            Fragment('unicode', 'docs/café.py', 1, 0, 'λ → ∞'),
            Fragment('empty', 'empty.py', 5, 0, ''),
        ]
        self.assertEqual(decode_fragments(encode_fragments(fragments)), fragments)
        self.assertEqual(decode_fragments('[]'), [])

    def test_decode_fragments_empty(self):
        for payload in ['', '   ', '\n']:
            with self.assertRaises(MalformedInterchangePayloadException):
                decode_fragments(payload)

    def test_decode_fragments_truncated(self):
        payload = encode_fragments([Fragment('greet', 'hello.py', 2, 0, 'print("hi")')])
        with self.assertRaises(MalformedInterchangePayloadException) as context:
            decode_fragments(payload[:-5])

        self.assertIn('not valid JSON', context.exception.message)

    def test_decode_fragments_schema_violations(self):
        payloads = [
            '{"id": "greet", "file": "hello.py", "line": 2, "col": 0, "content": ""}',
            '[{"id": "greet", "file": "hello.py", "line": 2, "col": 0}]',
            '[{"id": "greet", "file": "hello.py", "line": 0, "col": 0, "content": ""}]',
            '[{"id": "greet", "file": "hello.py", "line": 2, "col": -1, "content": ""}]',
            '[{"id": "greet", "file": "hello.py", "line": "2", "col": 0, "content": ""}]',
            '[{"id": 7, "file": "hello.py", "line": 2, "col": 0, "content": ""}]',
            '[{"id": "greet", "file": "hello.py", "line": 2, "col": 0, "content": "", "extra": 1}]',
            '["greet"]',
        ]
        for payload in payloads:
            with self.assertRaises(MalformedInterchangePayloadException, msg=payload) as context:
                decode_fragments(payload)
            self.assertIn('does not match schema', context.exception.message)

    def test_decode_fragments_non_integer_numbers(self):
        payloads = [
            '[{"id": "greet", "file": "hello.py", "line": 2.0, "col": 0, "content": ""}]',
            '[{"id": "greet", "file": "hello.py", "line": 2, "col": 0.0, "content": ""}]',
        ]
        for payload in payloads:
            with self.assertRaises(MalformedInterchangePayloadException, msg=payload) as context:
                decode_fragments(payload)
            self.assertIn('non-integer', context.exception.message)

    def test_decode_fragments_duplicate_id(self):
        payload = (
            '[{"id": "a", "file": "a.py", "line": 2, "col": 0, "content": "1"},'
            ' {"id": "a", "file": "b.py", "line": 2, "col": 0, "content": "2"}]'
        )
        with self.assertRaises(MalformedInterchangePayloadException) as context:
            decode_fragments(payload)

        self.assertIn('repeats identifier `a`', context.exception.message)


if __name__ == '__main__':
    unittest.main()
