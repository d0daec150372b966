"""Transformation operators: a transformation kind bound to its options.

An `Operator` is the single value that text fields, the serialization adapter
and the DataFrame helpers dispatch on. Each kind has its own options class:

| Kind | Options |
|---|---|
| capitalize, lower, upper, title, sentence, camel, pascal, snake, kebab | `CaseOptions` |
| replace | `ReplaceOptions` |
| truncate | `TruncateOptions` |
| trim | `TrimOptions` |
| reverse, digest | none |
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'OperatorKind',
    'CaseOptions',
    'ReplaceOptions',
    'TruncateOptions',
    'TrimOptions',
    'Operator'
]

from dataclasses import dataclass, replace as replace_fields
from enum import Enum
from typing import Any, Mapping, Optional, Union
from texttransforms import casing, editing
from texttransforms.casing import CaseMapping, CaseVariant, LocaleAware, Ordinal, resolve_casing
from texttransforms.charsets import CharacterSet, resolve_character_set
from texttransforms.digest import digest_hex
from texttransforms.patterns import DEFAULT_TRUNCATE_LENGTH, DEFAULT_CHARACTER_SET

class OperatorKind(Enum):
    """
    Enumeration of every transformation a text field can carry.
    """
    CAPITALIZE = "capitalize"
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"
    SENTENCE = "sentence"
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    KEBAB = "kebab"
    REPLACE = "replace"
    TRUNCATE = "truncate"
    TRIM = "trim"
    REVERSE = "reverse"
    DIGEST = "digest"

    @property
    def case_variant(self) -> Optional[CaseVariant]:
        """The matching `CaseVariant` for casing kinds, else None."""
        return _CASE_VARIANTS.get(self)

_CASE_VARIANTS = {
    kind: CaseVariant(kind.value)
    for kind in OperatorKind
    if kind.value in {variant.value for variant in CaseVariant}
}

@dataclass(frozen=True)
class CaseOptions:
    """
    Options for the casing kinds.

    Args:
        casing: `Ordinal()`, `LocaleAware()`, or a bool that is resolved to one
    """
    casing: CaseMapping = Ordinal()

    def __post_init__(self):
        object.__setattr__(self, 'casing', resolve_casing(self.casing))

@dataclass(frozen=True)
class ReplaceOptions:
    """
    Options for `OperatorKind.REPLACE`.

    Args:
        target: Substring (or, when bounded, single character) to replace
        replacement: Replacement text
        max_count: Maximum number of replacements, 0 for unbounded
    """
    target: str
    replacement: str
    max_count: int = 0

    def __post_init__(self):
        if self.max_count < 0:
            raise ValueError(f"max_count must be zero or positive, got {self.max_count}")

@dataclass(frozen=True)
class TruncateOptions:
    """
    Options for `OperatorKind.TRUNCATE`.
    """
    length: int = DEFAULT_TRUNCATE_LENGTH
    show_ellipsis: bool = True

    def __post_init__(self):
        if self.length < 0:
            raise ValueError(f"length must be zero or positive, got {self.length}")

@dataclass(frozen=True)
class TrimOptions:
    """
    Options for `OperatorKind.TRIM`.

    Args:
        characters: A `CharacterSet` or the name of a bundled set
    """
    characters: Union[str, CharacterSet] = DEFAULT_CHARACTER_SET

    def __post_init__(self):
        object.__setattr__(self, 'characters', resolve_character_set(self.characters))

_OPTION_TYPES = {
    OperatorKind.REPLACE: ReplaceOptions,
    OperatorKind.TRUNCATE: TruncateOptions,
    OperatorKind.TRIM: TrimOptions,
    OperatorKind.REVERSE: type(None),
    OperatorKind.DIGEST: type(None),
    **{kind: CaseOptions for kind in _CASE_VARIANTS}
}

def _apply_case(text: str, kind: OperatorKind, options: CaseOptions) -> str:
    return casing.fold(text, kind.case_variant, options.casing)

def _apply_replace(text: str, kind: OperatorKind, options: ReplaceOptions) -> str:
    return editing.replace(text, options.target, options.replacement, options.max_count)

def _apply_truncate(text: str, kind: OperatorKind, options: TruncateOptions) -> str:
    return editing.truncate(text, options.length, options.show_ellipsis)

def _apply_trim(text: str, kind: OperatorKind, options: TrimOptions) -> str:
    return editing.trim(text, options.characters)

_APPLIERS = {
    OperatorKind.REPLACE: _apply_replace,
    OperatorKind.TRUNCATE: _apply_truncate,
    OperatorKind.TRIM: _apply_trim,
    OperatorKind.REVERSE: lambda text, kind, options: editing.reverse(text),
    OperatorKind.DIGEST: lambda text, kind, options: digest_hex(text),
    **{kind: _apply_case for kind in _CASE_VARIANTS}
}

@dataclass(frozen=True)
class Operator:
    """
    A transformation kind together with its options.

    Args:
        kind: An `OperatorKind` or its string value
        options: Options instance for the kind. May be omitted for every kind
            except `replace`, in which case the defaults are used.

    Raises:
        ValueError: If the kind is unknown, if `replace` is missing its options,
            or if the options do not belong to the kind.

    Example:
        >>> Operator('title').apply('welcome JOHN DOe')
        'Welcome John Doe'
        >>> Operator.replace('.', '', max_count=1).apply('john.doe@gmail.com')
        'johndoe@gmail.com'
    """
    kind: OperatorKind
    options: Any = None

    def __post_init__(self):
        kind = OperatorKind(self.kind)
        object.__setattr__(self, 'kind', kind)

        options_type = _OPTION_TYPES[kind]
        if self.options is None and options_type is not type(None):
            if options_type is ReplaceOptions:
                raise ValueError("replace requires a target and a replacement")
            object.__setattr__(self, 'options', options_type())
        elif not isinstance(self.options, options_type):
            raise ValueError(
                f"{kind.value} expects {options_type.__name__}, got {type(self.options).__name__}"
            )

    def apply(self, text: str) -> str:
        return _APPLIERS[self.kind](text, self.kind, self.options)

    def decoding_defaults(self) -> 'Operator':
        """
        The operator used when a value of this kind is decoded.

        Decoding never carries options through the wire format: casing falls back
        to `Ordinal`, replacement becomes unbounded, truncation and trimming use
        their default length and character set. The replacement target and text
        have no default and are kept.

        Example:
            >>> Operator.case('upper', localized=True).decoding_defaults()
            Operator(kind=<OperatorKind.UPPER: 'upper'>, options=CaseOptions(casing=Ordinal()))
        """
        if self.kind is OperatorKind.REPLACE:
            return Operator(self.kind, replace_fields(self.options, max_count=0))
        elif self.options is None:
            return self
        else:
            return Operator(self.kind)

    @classmethod
    def case(cls, variant: Union[CaseVariant, str], localized: Union[bool, CaseMapping] = False) -> 'Operator':
        return cls(OperatorKind(CaseVariant(variant).value), CaseOptions(localized))

    @classmethod
    def replace(cls, target: str, replacement: str, max_count: int = 0) -> 'Operator':
        return cls(OperatorKind.REPLACE, ReplaceOptions(target, replacement, max_count))

    @classmethod
    def truncate(cls, length: int = DEFAULT_TRUNCATE_LENGTH, show_ellipsis: bool = True) -> 'Operator':
        return cls(OperatorKind.TRUNCATE, TruncateOptions(length, show_ellipsis))

    @classmethod
    def trim(cls, characters: Union[str, CharacterSet] = DEFAULT_CHARACTER_SET) -> 'Operator':
        return cls(OperatorKind.TRIM, TrimOptions(characters))

    @classmethod
    def reverse(cls) -> 'Operator':
        return cls(OperatorKind.REVERSE)

    @classmethod
    def digest(cls) -> 'Operator':
        return cls(OperatorKind.DIGEST)

    @classmethod
    def parse(cls, spec: Union['Operator', str, Mapping[str, Any]]) -> 'Operator':
        """
        Build an operator from a kind name or a mapping, as found in YAML or JSON schemas.

        Mappings hold a `kind` key plus the option names of that kind. Casing
        kinds accept `localized` (bool) or `locale` (a locale id).

        Example:
            >>> Operator.parse('snake') == Operator('snake')
            True
            >>> Operator.parse({'kind': 'truncate', 'length': 5}).apply('Hello, world')
            'Hello...'
        """
        if isinstance(spec, Operator):
            return spec
        if isinstance(spec, str):
            return cls(spec)

        settings = dict(spec)
        kind = OperatorKind(settings.pop('kind'))
        if kind.case_variant is not None:
            locale_id = settings.pop('locale', None)
            localized = LocaleAware(locale_id) if locale_id else settings.pop('localized', False)
            settings.pop('localized', None)
            if settings:
                raise TypeError(f"{kind.value} got unexpected options {sorted(settings)}")
            return cls.case(kind.case_variant, localized)
        options_type = _OPTION_TYPES[kind]
        if options_type is type(None):
            return cls(kind)
        return cls(kind, options_type(**settings))
