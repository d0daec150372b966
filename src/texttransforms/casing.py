"""Case conversion for single strings.

This module provides the casing algorithms used by text fields: plain lower and
upper case, word capitalization, and the compound styles built on top of them
(title, sentence, camel, pascal, snake and kebab case).

Every algorithm takes a casing strategy. `Ordinal` applies the default Unicode
case mapping and never depends on the host. `LocaleAware` applies the
language-sensitive rules of the host locale (or of an explicit locale id) on
top of the default mapping. Passing `localized=True` selects `LocaleAware()`
and `localized=False` selects `Ordinal()`.

Word-based styles split on the ASCII space only. Empty words produced by
leading, trailing or repeated spaces are kept as empty segments.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'CaseVariant',
    'CaseMapping',
    'Ordinal',
    'LocaleAware',

    # Functions
    'resolve_casing',
    'fold',
    'capitalize',
    'lower',
    'upper',
    'title',
    'sentence',
    'camel',
    'pascal',
    'snake',
    'kebab'
]

import locale
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from texttransforms.patterns import (
    WORD_SEPARATOR,
    SNAKE_SEPARATOR,
    KEBAB_SEPARATOR,
    CAPITALIZE_WORD_PATTERN,
    SPECIAL_CASING_LANGUAGES,
    LOCALE_SEPARATOR_PATTERN
)

class CaseVariant(Enum):
    """
    Enumeration of the casing algorithms understood by `fold`.
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

class CaseMapping:
    """
    Interface shared by the casing strategies.

    Subclasses map a whole string to lower or upper case and capitalize a
    single word. Call sites never need to know which strategy they hold.
    """
    def lower(self, text: str) -> str:
        raise NotImplementedError

    def upper(self, text: str) -> str:
        raise NotImplementedError

    def capitalize_word(self, word: str) -> str:
        raise NotImplementedError

@dataclass(frozen=True)
class Ordinal(CaseMapping):
    """
    Locale-independent casing with the default Unicode case tables.

    Example:
        >>> Ordinal().upper('istanbul')
        'ISTANBUL'
    """
    def lower(self, text: str) -> str:
        return text.lower()

    def upper(self, text: str) -> str:
        return text.upper()

    def capitalize_word(self, word: str) -> str:
        return word.capitalize()

@dataclass(frozen=True)
class LocaleAware(CaseMapping):
    """
    Locale-sensitive casing.

    Args:
        locale_id: A POSIX (`tr_TR.UTF-8`) or BCP 47 (`tr-TR`) locale id. If
            omitted, the host's `LC_CTYPE` locale is read on every call.

    Turkish and Azeri map dotted and dotless i separately. Lithuanian keeps the
    combining dot above on lower-cased i and j that carry accents. All other
    languages use the default Unicode mapping.

    Example:
        >>> LocaleAware('tr_TR').upper('istanbul')
        'İSTANBUL'
        >>> LocaleAware('tr_TR').lower('ISPARTA')
        'ısparta'
        >>> LocaleAware('en_US').lower('ISPARTA')
        'isparta'
    """
    locale_id: Optional[str] = None

    @property
    def language(self) -> str:
        locale_id = self.locale_id or locale.setlocale(locale.LC_CTYPE)
        return LOCALE_SEPARATOR_PATTERN.split(locale_id)[0].lower()

    @property
    def rules(self) -> Optional[str]:
        return SPECIAL_CASING_LANGUAGES.get(self.language)

    def lower(self, text: str) -> str:
        rules = self.rules
        if rules == 'turkic':
            text = _turkic_prelower(text)
        elif rules == 'lithuanian':
            text = _lithuanian_prelower(text)
        return text.lower()

    def upper(self, text: str) -> str:
        rules = self.rules
        if rules == 'turkic':
            text = text.replace('i', '\u0130')
        elif rules == 'lithuanian':
            text = _lithuanian_preupper(text)
        return text.upper()

    def capitalize_word(self, word: str) -> str:
        if not word:
            return word
        head, tail = word[:1], word[1:]
        if self.rules == 'turkic' and head == 'i':
            head = '\u0130'
        elif self.rules == 'lithuanian':
            # the dot above a soft-dotted letter goes away once it is capitalized
            head, tail = _split_lithuanian_head(word)
        return head.title() + self.lower(tail)

# Lithuanian special casing tables
_SOFT_DOTTED = frozenset('ij\u012f\u0268\u0456\u0458\u1e2d\u1ecb')
_DOT_ABOVE = '\u0307'
_LITHUANIAN_ACCENTED = {
    '\u00cc': 'i\u0307\u0300',
    '\u00cd': 'i\u0307\u0301',
    '\u0128': 'i\u0307\u0303'
}
_LITHUANIAN_DOTTED = {
    'I': 'i\u0307',
    'J': 'j\u0307',
    '\u012e': '\u012f\u0307'
}

def _turkic_prelower(text: str) -> str:
    return (text
        .replace('I\u0307', 'i')
        .replace('\u0130', 'i')
        .replace('I', '\u0131'))

def _more_above(text: str, start: int) -> bool:
    for char in text[start:]:
        combining_class = unicodedata.combining(char)
        if combining_class == 0:
            return False
        if combining_class == 230:
            return True
    return False

def _lithuanian_prelower(text: str) -> str:
    chars = []
    for index, char in enumerate(text):
        if char in _LITHUANIAN_ACCENTED:
            chars.append(_LITHUANIAN_ACCENTED[char])
        elif char in _LITHUANIAN_DOTTED and _more_above(text, index + 1):
            chars.append(_LITHUANIAN_DOTTED[char])
        else:
            chars.append(char)
    return ''.join(chars)

def _lithuanian_preupper(text: str) -> str:
    chars = []
    after_soft_dotted = False
    for char in text:
        combining_class = unicodedata.combining(char)
        if char == _DOT_ABOVE and after_soft_dotted:
            continue
        if combining_class == 0:
            after_soft_dotted = char in _SOFT_DOTTED
        elif combining_class == 230:
            after_soft_dotted = False
        chars.append(char)
    return ''.join(chars)

def _split_lithuanian_head(word: str):
    head, tail = word[:1], word[1:]
    if head in _SOFT_DOTTED and tail.startswith(_DOT_ABOVE):
        tail = tail[1:]
    return head, tail

def resolve_casing(localized: Union[bool, CaseMapping]) -> CaseMapping:
    """
    Turn the `localized` argument accepted throughout the package into a strategy.

    Args:
        localized: A boolean switch or an explicit `CaseMapping`

    Returns:
        `Ordinal()` for False, `LocaleAware()` for True, or the strategy unchanged

    Raises:
        TypeError: If `localized` is neither a bool nor a `CaseMapping`.

    Example:
        >>> resolve_casing(False)
        Ordinal()
        >>> resolve_casing(True)
        LocaleAware(locale_id=None)
    """
    if isinstance(localized, CaseMapping):
        return localized
    elif isinstance(localized, bool):
        return LocaleAware() if localized else Ordinal()
    else:
        raise TypeError(f'Expected bool or CaseMapping, got {type(localized).__name__}')

def capitalize(text: str, localized: Union[bool, CaseMapping] = False) -> str:
    """
    Capitalize the first letter of every word and lower-case the rest.

    Words are separated by any whitespace; the separators are kept as they are.

    Args:
        text: Input string
        localized: Casing strategy or locale switch

    Returns:
        Capitalized string

    Example:
        >>> capitalize('john')
        'John'
        >>> capitalize('mARY  aNNE\\tsmith')
        'Mary  Anne\\tSmith'
    """
    casing = resolve_casing(localized)
    parts = CAPITALIZE_WORD_PATTERN.split(text)
    return ''.join(casing.capitalize_word(part) for part in parts)

def lower(text: str, localized: Union[bool, CaseMapping] = False) -> str:
    """
    Example:
        >>> lower('DOE')
        'doe'
    """
    return resolve_casing(localized).lower(text)

def upper(text: str, localized: Union[bool, CaseMapping] = False) -> str:
    """
    Example:
        >>> upper('doe')
        'DOE'
    """
    return resolve_casing(localized).upper(text)

def title(text: str, localized: Union[bool, CaseMapping] = False) -> str:
    """
    Lower-case the string, then capitalize every space-separated word.

    Example:
        >>> title('welcome JOHN DOe')
        'Welcome John Doe'
    """
    casing = resolve_casing(localized)
    words = casing.lower(text).split(WORD_SEPARATOR)
    return WORD_SEPARATOR.join(map(casing.capitalize_word, words))

def sentence(text: str, localized: Union[bool, CaseMapping] = False) -> str:
    """
    Lower-case the string and upper-case only its first character.

    Unlike `title`, the string is treated as a single unit.

    Example:
        >>> sentence('thE qUiCk BrOwN fOx')
        'The quick brown fox'
    """
    casing = resolve_casing(localized)
    return casing.capitalize_word(casing.lower(text))

def camel(text: str, localized: Union[bool, CaseMapping] = False) -> str:
    """
    Example:
        >>> camel('Property Wrappers')
        'propertyWrappers'
    """
    casing = resolve_casing(localized)
    first, *rest = casing.lower(text).split(WORD_SEPARATOR)
    return first + ''.join(map(casing.capitalize_word, rest))

def pascal(text: str, localized: Union[bool, CaseMapping] = False) -> str:
    """
    Example:
        >>> pascal('property WRAPPERS')
        'PropertyWrappers'
    """
    casing = resolve_casing(localized)
    words = casing.lower(text).split(WORD_SEPARATOR)
    return ''.join(map(casing.capitalize_word, words))

def snake(text: str, localized: Union[bool, CaseMapping] = False) -> str:
    """
    Example:
        >>> snake('thE qUiCk BrOwN fOx')
        'the_quick_brown_fox'
    """
    lowered = resolve_casing(localized).lower(text)
    return lowered.replace(WORD_SEPARATOR, SNAKE_SEPARATOR)

def kebab(text: str, localized: Union[bool, CaseMapping] = False) -> str:
    """
    Example:
        >>> kebab('thE qUiCk BrOwN fOx')
        'the-quick-brown-fox'
    """
    lowered = resolve_casing(localized).lower(text)
    return lowered.replace(WORD_SEPARATOR, KEBAB_SEPARATOR)

_VARIANTS = {
    CaseVariant.CAPITALIZE: capitalize,
    CaseVariant.LOWER: lower,
    CaseVariant.UPPER: upper,
    CaseVariant.TITLE: title,
    CaseVariant.SENTENCE: sentence,
    CaseVariant.CAMEL: camel,
    CaseVariant.PASCAL: pascal,
    CaseVariant.SNAKE: snake,
    CaseVariant.KEBAB: kebab
}

def fold(text: str, variant: CaseVariant, localized: Union[bool, CaseMapping] = False) -> str:
    """
    Apply a casing algorithm by name.

    Args:
        text: Input string, may be empty
        variant: A `CaseVariant` or its string value
        localized: Casing strategy or locale switch

    Returns:
        The converted string

    Example:
        >>> fold('john', CaseVariant.CAPITALIZE)
        'John'
        >>> fold('Property Wrappers', 'camel')
        'propertyWrappers'
    """
    return _VARIANTS[CaseVariant(variant)](text, localized)
