"""Self-normalizing text fields.

A `TransformField` binds an `Operator` to a string slot. The operator runs when
the field is created and again on every `set()`, so the held value is always
transformed. Reading the value never recomputes anything.

The factory functions in this module are the usual way to create fields:

    >>> name = capitalized('john')
    >>> name.get()
    'John'
    >>> name.set('mARY')
    >>> name.get()
    'Mary'
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'TransformField',

    # Functions
    'capitalized',
    'lowercased',
    'uppercased',
    'title_case',
    'sentence_case',
    'camel_case',
    'pascal_case',
    'snake_case',
    'kebab_case',
    'replacing_occurrences',
    'truncated',
    'trimmed',
    'reversed_text',
    'sha256_hex'
]

from typing import Union
from texttransforms.casing import CaseMapping, CaseVariant
from texttransforms.charsets import CharacterSet
from texttransforms.operators import Operator
from texttransforms.patterns import DEFAULT_TRUNCATE_LENGTH, DEFAULT_CHARACTER_SET

class TransformField:
    """
    A string slot that always holds a transformed value.

    Args:
        value: Raw initial value
        operator: The transformation applied on creation and on every `set()`

    Raises:
        TypeError: If a raw value is not a string.

    Note:
        Reapplying an operator to its own output is not always a no-op (for
        example `reverse`), which is why `set()` expects raw input.
    """
    __slots__ = ('_operator', '_value')

    def __init__(self, value: str, operator: Operator):
        self._operator = operator
        self._value = self._transform(value)

    def _transform(self, value: str) -> str:
        if not isinstance(value, str):
            raise TypeError(f"{self._operator.kind.value} field expects str, got {type(value).__name__}")
        return self._operator.apply(value)

    @property
    def operator(self) -> Operator:
        return self._operator

    @property
    def value(self) -> str:
        return self._value

    def get(self) -> str:
        return self._value

    def set(self, value: str) -> None:
        self._value = self._transform(value)

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"TransformField({self._value!r}, kind={self._operator.kind.value!r})"

    def __eq__(self, other):
        if not isinstance(other, TransformField):
            return NotImplemented
        return self._operator == other._operator and self._value == other._value

    __hash__ = None

def capitalized(value: str, localized: Union[bool, CaseMapping] = False) -> TransformField:
    return TransformField(value, Operator.case(CaseVariant.CAPITALIZE, localized))

def lowercased(value: str, localized: Union[bool, CaseMapping] = False) -> TransformField:
    return TransformField(value, Operator.case(CaseVariant.LOWER, localized))

def uppercased(value: str, localized: Union[bool, CaseMapping] = False) -> TransformField:
    return TransformField(value, Operator.case(CaseVariant.UPPER, localized))

def title_case(value: str, localized: Union[bool, CaseMapping] = False) -> TransformField:
    """
    Example:
        >>> title_case('welcome JOHN DOe').get()
        'Welcome John Doe'
    """
    return TransformField(value, Operator.case(CaseVariant.TITLE, localized))

def sentence_case(value: str, localized: Union[bool, CaseMapping] = False) -> TransformField:
    return TransformField(value, Operator.case(CaseVariant.SENTENCE, localized))

def camel_case(value: str, localized: Union[bool, CaseMapping] = False) -> TransformField:
    """
    Example:
        >>> camel_case('Property Wrappers').get()
        'propertyWrappers'
    """
    return TransformField(value, Operator.case(CaseVariant.CAMEL, localized))

def pascal_case(value: str, localized: Union[bool, CaseMapping] = False) -> TransformField:
    return TransformField(value, Operator.case(CaseVariant.PASCAL, localized))

def snake_case(value: str, localized: Union[bool, CaseMapping] = False) -> TransformField:
    return TransformField(value, Operator.case(CaseVariant.SNAKE, localized))

def kebab_case(value: str, localized: Union[bool, CaseMapping] = False) -> TransformField:
    return TransformField(value, Operator.case(CaseVariant.KEBAB, localized))

def replacing_occurrences(value: str, target: str, replacement: str, count: int = 0) -> TransformField:
    """
    Field that replaces `target` with `replacement`, at most `count` times (0 for all).

    See `texttransforms.editing.replace` for how bounded replacement matches.

    Example:
        >>> replacing_occurrences('hello world, hello Python!', 'hello', 'hi').get()
        'hi world, hi Python!'
    """
    return TransformField(value, Operator.replace(target, replacement, count))

def truncated(value: str, length: int = DEFAULT_TRUNCATE_LENGTH, show_ellipsis: bool = True) -> TransformField:
    return TransformField(value, Operator.truncate(length, show_ellipsis))

def trimmed(value: str, characters: Union[str, CharacterSet] = DEFAULT_CHARACTER_SET) -> TransformField:
    return TransformField(value, Operator.trim(characters))

def reversed_text(value: str) -> TransformField:
    return TransformField(value, Operator.reverse())

def sha256_hex(value: str) -> TransformField:
    return TransformField(value, Operator.digest())
