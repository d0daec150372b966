import io
import unittest
from texttransforms import fields
from texttransforms.casing import LocaleAware
from texttransforms.operators import Operator
from texttransforms.serialization import (
    DecodeError,
    TransformRecord,
    decode_field,
    encode_field
)

SCHEMA = {
    'first_name': 'capitalize',
    'title': 'title',
    'email': {'kind': 'replace', 'target': '.', 'replacement': ''},
    'slug': 'kebab'
}

DOCUMENT = '''{
    "first_name": "john",
    "title": "welcome JOHN DOe",
    "email": "john.doe@gmail.com",
    "slug": "Property Wrappers",
    "unused": 3
}'''

class TestDecodeField(unittest.TestCase):
    def test_decode_applies_operator(self):
        self.assertEqual(decode_field('john', Operator('capitalize')).get(), 'John')

    def test_decode_uses_default_options(self):
        operator = Operator.case('upper', LocaleAware('tr_TR'))
        self.assertEqual(decode_field('istanbul', operator).get(), 'ISTANBUL')
        self.assertEqual(fields.TransformField('istanbul', operator).get(), 'İSTANBUL')

    def test_decode_bounded_replace_is_unbounded(self):
        field = decode_field('a.b.c', Operator.replace('.', '', 1))
        self.assertEqual(field.get(), 'abc')

    def test_decode_truncate_uses_default_length(self):
        field = decode_field('x' * 20, Operator.truncate(5))
        self.assertEqual(field.get(), 'x' * 20 + '...')

    def test_type_mismatch(self):
        for token in (1, None, ['john'], {'name': 'john'}, 2.5, True):
            with self.assertRaises(DecodeError) as context:
                decode_field(token, Operator('lower'), 'name')
            self.assertEqual(context.exception.kind, 'type mismatch')
            self.assertEqual(context.exception.path, 'name')

    def test_decode_error_is_value_error(self):
        with self.assertRaises(ValueError):
            decode_field(1, Operator('lower'))

class TestEncodeField(unittest.TestCase):
    def test_encode_is_verbatim(self):
        field = fields.reversed_text('abc')
        self.assertEqual(encode_field(field), 'cba')

    def test_round_trip_reapplies(self):
        field = decode_field(encode_field(fields.reversed_text('abc')), Operator.reverse())
        self.assertEqual(field.get(), 'abc')

    def test_round_trip_of_fixed_point(self):
        field = decode_field(encode_field(fields.snake_case('Hello World')), Operator('snake'))
        self.assertEqual(field.get(), 'hello_world')

class TestRecordJSON(unittest.TestCase):
    def test_from_json(self):
        record = TransformRecord.from_json(DOCUMENT, SCHEMA)
        self.assertEqual(record['first_name'], 'John')
        self.assertEqual(record['title'], 'Welcome John Doe')
        self.assertEqual(record['email'], 'johndoe@gmailcom')
        self.assertEqual(record['slug'], 'property-wrappers')
        self.assertEqual(list(record), ['first_name', 'title', 'email', 'slug'])
        self.assertEqual(len(record), 4)

    def test_to_json(self):
        record = TransformRecord.from_json('{"first_name": "jOHN"}', {'first_name': 'capitalize'})
        self.assertEqual(record.to_json(), '{"first_name": "John"}')

    def test_missing_key(self):
        with self.assertRaises(DecodeError) as context:
            TransformRecord.from_json('{"first_name": "john"}', SCHEMA)
        self.assertEqual(context.exception.kind, 'key not found')
        self.assertEqual(context.exception.path, 'title')

    def test_wrong_token_type(self):
        with self.assertRaises(DecodeError) as context:
            TransformRecord.from_json('{"slug": 12}', {'slug': 'kebab'})
        self.assertEqual(context.exception.kind, 'type mismatch')
        self.assertEqual(context.exception.path, 'slug')

    def test_not_a_mapping(self):
        with self.assertRaises(DecodeError) as context:
            TransformRecord.from_json('["john"]', {'slug': 'kebab'})
        self.assertEqual(context.exception.kind, 'type mismatch')

    def test_corrupted(self):
        with self.assertRaises(DecodeError) as context:
            TransformRecord.from_json('{"slug": ', {'slug': 'kebab'})
        self.assertEqual(context.exception.kind, 'data corrupted')
        self.assertIsNotNone(context.exception.__cause__)

    def test_invalid_utf8_bytes(self):
        with self.assertRaises(DecodeError) as context:
            TransformRecord.from_json(b'{"name": "\xff"}', {'name': 'title'})
        self.assertEqual(context.exception.kind, 'data corrupted')
        self.assertIsInstance(context.exception.__cause__, UnicodeDecodeError)

    def test_round_trip_reapplies(self):
        schema = {'secret': 'reverse'}
        record = TransformRecord.from_json('{"secret": "abc"}', schema)
        again = TransformRecord.from_json(record.to_json(), schema)
        self.assertEqual(record['secret'], 'cba')
        self.assertEqual(again['secret'], 'abc')

class TestRecordYAML(unittest.TestCase):
    def test_to_yaml(self):
        record = TransformRecord.from_dict({'name': 'jOHN doe', 'slug': 'A B'}, {'name': 'title', 'slug': 'snake'})
        self.assertEqual(record.to_yaml(), 'name: John Doe\nslug: a_b\n')

    def test_from_yaml_stream(self):
        stream = io.StringIO('name: jOHN doe\n')
        record = TransformRecord.from_yaml(stream, {'name': 'title'})
        self.assertEqual(record['name'], 'John Doe')

    def test_to_yaml_stream(self):
        record = TransformRecord.from_dict({'hash': 'Hello, CryptoKit!'}, {'hash': 'digest'})
        stream = io.StringIO()
        record.to_yaml(stream)
        self.assertEqual(
            stream.getvalue(),
            'hash: 746e0151b9f045826c327b7a465b02e5fdf15d060eca2dcdd74827778aa1355b\n'
        )

    def test_yaml_type_mismatch(self):
        with self.assertRaises(DecodeError) as context:
            TransformRecord.from_yaml('name: 42\n', {'name': 'title'})
        self.assertEqual(context.exception.kind, 'type mismatch')

    def test_corrupted(self):
        with self.assertRaises(DecodeError) as context:
            TransformRecord.from_yaml('name: [john\n', {'name': 'title'})
        self.assertEqual(context.exception.kind, 'data corrupted')

class TestRecordFields(unittest.TestCase):
    def test_create_uses_full_options(self):
        record = TransformRecord.create({'name': Operator.truncate(3, False)}, {'name': 'abcdef'})
        self.assertEqual(record['name'], 'abc')

    def test_create_missing_value(self):
        with self.assertRaises(KeyError):
            TransformRecord.create({'name': 'title'}, {})

    def test_set(self):
        record = TransformRecord.from_dict({'name': 'john'}, {'name': 'capitalize'})
        record.set('name', 'mARY')
        self.assertEqual(record['name'], 'Mary')
        self.assertEqual(record.field('name').get(), 'Mary')
        self.assertEqual(record.to_dict(), {'name': 'Mary'})
