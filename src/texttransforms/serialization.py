"""Decoding and encoding of text fields and records of text fields.

Every field is serialized as a single string. Decoding feeds the raw string
through the field's operator with that operator's decoding defaults (see
`texttransforms.operators.Operator.decoding_defaults`); encoding writes the
held, already-transformed value without touching it. A round trip therefore
re-applies the operator, which only preserves the value for operators whose
output is a fixed point of themselves.

Records are decoded against a schema that maps field names to operators. A
schema value may be an `Operator`, a kind name (`'title'`) or a mapping
(`{'kind': 'replace', 'target': '.', 'replacement': ''}`).

Example:
    >>> record = TransformRecord.from_json('{"name": "jOHN doe"}', {'name': 'title'})
    >>> record['name']
    'John Doe'
    >>> record.to_json()
    '{"name": "John Doe"}'
"""

__docformat__ = 'google'

__all__ = [
    # Exceptions
    'DecodeError',

    # Functions
    'decode_field',
    'encode_field',

    # Classes
    'TransformRecord'
]

import json
import logging
import yaml
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Union
from texttransforms.fields import TransformField
from texttransforms.operators import Operator

logger = logging.getLogger(__name__)

TYPE_MISMATCH: str = "type mismatch"
"""`DecodeError.kind` for a token that is not a string (or a record that is not a mapping)."""

KEY_NOT_FOUND: str = "key not found"
"""`DecodeError.kind` for a schema field that is missing from the data."""

DATA_CORRUPTED: str = "data corrupted"
"""`DecodeError.kind` for a JSON or YAML document that cannot be parsed."""

class DecodeError(ValueError):
    """
    Raised when serialized data cannot be turned into text fields.

    Args:
        kind: One of `TYPE_MISMATCH`, `KEY_NOT_FOUND` or `DATA_CORRUPTED`
        message: Human readable description
        path: Name of the field being decoded, if any
    """
    def __init__(self, kind: str, message: str, path: Optional[str] = None):
        self.kind = kind
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)

def decode_field(token: Any, operator: Operator, path: Optional[str] = None) -> TransformField:
    """
    Build a field from a single decoded token.

    Args:
        token: The decoded value; must be a string
        operator: Operator of the field. Its decoding defaults are applied.
        path: Field name, used in error messages

    Raises:
        DecodeError: If the token is not a string.

    Example:
        >>> decode_field('DOE', Operator.case('lower', localized=True)).get()
        'doe'
    """
    if not isinstance(token, str):
        raise DecodeError(
            TYPE_MISMATCH,
            f"Expected to decode str but found {type(token).__name__}",
            path
        )
    return TransformField(token, operator.decoding_defaults())

def encode_field(field: TransformField) -> str:
    return field.get()

def _parse_schema(schema: Mapping[str, Any]) -> Dict[str, Operator]:
    return {name: Operator.parse(spec) for name, spec in schema.items()}

@dataclass
class TransformRecord:
    """
    A named group of text fields, decoded from or encoded to JSON and YAML.

    Fields live and die with their record. Use `record[name]` to read a value,
    `record.set(name, raw)` to reassign it and `record.field(name)` for the
    underlying `TransformField`.
    """
    schema: Dict[str, Operator]
    fields: Dict[str, TransformField]

    @classmethod
    def create(cls, schema: Mapping[str, Any], values: Mapping[str, str]) -> 'TransformRecord':
        """
        Build a record from raw values, applying each operator with its full options.

        Raises:
            KeyError: If a schema field has no value.
        """
        operators = _parse_schema(schema)
        fields = {name: TransformField(values[name], operator) for name, operator in operators.items()}
        return cls(operators, fields)

    @classmethod
    def from_dict(cls, data: Any, schema: Mapping[str, Any]) -> 'TransformRecord':
        """
        Decode a mapping of raw tokens. Keys that are not in the schema are ignored.

        Raises:
            DecodeError: If `data` is not a mapping, a schema field is missing, or
                a token is not a string.
        """
        if not isinstance(data, Mapping):
            raise DecodeError(TYPE_MISMATCH, f"Expected to decode a mapping but found {type(data).__name__}")

        operators = _parse_schema(schema)
        fields = {}
        for name, operator in operators.items():
            if name not in data:
                raise DecodeError(KEY_NOT_FOUND, "No value associated with key", name)
            fields[name] = decode_field(data[name], operator, name)

        logger.debug("Decoded record with fields %s", list(fields))
        return cls(operators, fields)

    def to_dict(self) -> Dict[str, str]:
        return {name: encode_field(field) for name, field in self.fields.items()}

    @classmethod
    def from_json(cls, text: Union[str, bytes], schema: Mapping[str, Any]) -> 'TransformRecord':
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(DATA_CORRUPTED, f"Invalid JSON: {e}") from e
        return cls.from_dict(data, schema)

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, **kwargs)

    @classmethod
    def from_yaml(cls, stream, schema: Mapping[str, Any]) -> 'TransformRecord':
        """
        Decode a YAML document given as a string or an open file.

        Example:
            >>> TransformRecord.from_yaml('slug: Hello World', {'slug': 'kebab'})['slug']
            'hello-world'
        """
        try:
            data = yaml.safe_load(stream)
        except yaml.YAMLError as e:
            raise DecodeError(DATA_CORRUPTED, f"Invalid YAML: {e}") from e
        return cls.from_dict(data, schema)

    def to_yaml(self, stream=None) -> Optional[str]:
        """Write the record as YAML to `stream`, or return it as a string if no stream is given."""
        logger.debug("Encoding record with fields %s", list(self.fields))
        return yaml.safe_dump(self.to_dict(), stream, sort_keys=False, allow_unicode=True)

    def field(self, name: str) -> TransformField:
        return self.fields[name]

    def set(self, name: str, value: str) -> None:
        self.fields[name].set(value)

    def __getitem__(self, name: str) -> str:
        return self.fields[name].get()

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)
