"""Content edits for single strings: replacement, truncation, trimming and reversal.

Truncation, reversal and bounded replacement work on user-perceived characters
(extended grapheme clusters), so combining marks, emoji sequences and flags
are never split apart. Trimming works on individual code points, because
character sets are defined over code points.
"""

__docformat__ = 'google'

__all__ = [
    'graphemes',
    'replace',
    'truncate',
    'trim',
    'reverse'
]

import logging
from typing import List, Union
from texttransforms.charsets import CharacterSet, resolve_character_set
from texttransforms.patterns import (
    ELLIPSIS,
    DEFAULT_TRUNCATE_LENGTH,
    DEFAULT_CHARACTER_SET,
    GRAPHEME_PATTERN
)

logger = logging.getLogger(__name__)

def graphemes(text: str) -> List[str]:
    """
    Split a string into extended grapheme clusters.

    Example:
        >>> len(graphemes('cafe\\u0301'))
        4
    """
    return GRAPHEME_PATTERN.findall(text)

def replace(text: str, target: str, replacement: str, max_count: int = 0) -> str:
    """
    Replace occurrences of `target` with `replacement`.

    With `max_count == 0` every non-overlapping occurrence is replaced, scanning
    left to right with a case-sensitive match. An empty target leaves the text
    unchanged.

    With `max_count > 0` the text is scanned one character at a time and each
    character whose lower-cased form equals `target.lower()` is replaced, until
    `max_count` replacements have been made. Because the comparison is per
    character, a multi-character target never matches on this path.

    Args:
        text: Input string
        target: Substring to look for
        replacement: Substring to put in its place
        max_count: Maximum number of replacements, or 0 for all of them

    Returns:
        Text with replacements applied

    Raises:
        ValueError: If `max_count` is negative.

    Example:
        >>> replace('john.doe', '.', '')
        'johndoe'
        >>> replace('john.doe@gmail.com', '.', '', 1)
        'johndoe@gmail.com'
        >>> replace('Banana', 'a', 'o', 2)
        'Bonona'
        >>> replace('Banana', 'B', 'C', 1)
        'Canana'
    """
    if max_count < 0:
        raise ValueError(f"max_count must be zero or positive, got {max_count}")
    if max_count == 0:
        if not target:
            return text
        return text.replace(target, replacement)

    if len(graphemes(target)) > 1:
        logger.warning(
            "Bounded replacement compares single characters; target %r will never match",
            target
        )

    folded_target = target.lower()
    replaced = 0
    chars = []
    for char in graphemes(text):
        if replaced < max_count and char.lower() == folded_target:
            chars.append(replacement)
            replaced += 1
        else:
            chars.append(char)
    return ''.join(chars)

def truncate(text: str, length: int = DEFAULT_TRUNCATE_LENGTH, show_ellipsis: bool = True) -> str:
    """
    Keep the first `length` characters and optionally append an ellipsis.

    The ellipsis is appended whenever `show_ellipsis` is set, even if the text
    was already short enough. Words may be cut in the middle.

    Raises:
        ValueError: If `length` is negative.

    Example:
        >>> truncate('The quick brown fox jumps over the lazy dog', 10)
        'The quick ...'
        >>> truncate('The quick brown fox jumps over the lazy dog', 9, show_ellipsis=False)
        'The quick'
        >>> truncate('Hi', 10)
        'Hi...'
    """
    if length < 0:
        raise ValueError(f"length must be zero or positive, got {length}")
    kept = ''.join(graphemes(text)[:length])
    return kept + ELLIPSIS if show_ellipsis else kept

def trim(text: str, characters: Union[str, CharacterSet] = DEFAULT_CHARACTER_SET) -> str:
    """
    Remove leading and trailing characters that belong to a character set.

    Args:
        text: Input string
        characters: A `CharacterSet` or the name of a bundled set

    Returns:
        Text without the matching prefix and suffix; the interior is untouched

    Example:
        >>> trim('  John Doe\\t')
        'John Doe'
        >>> trim('...wait, what?!', 'punctuation')
        'wait, what'
        >>> trim('--kebab-case--', CharacterSet.of('-'))
        'kebab-case'
    """
    charset = resolve_character_set(characters)
    start, end = 0, len(text)
    while start < end and text[start] in charset:
        start += 1
    while end > start and text[end - 1] in charset:
        end -= 1
    return text[start:end]

def reverse(text: str) -> str:
    """
    Reverse the order of user-perceived characters.

    Reversing twice gives back the input unless the reversed text segments
    differently: a leading combining mark attaches to the character that ends
    up before it, and an odd run of regional indicators pairs up differently.

    Example:
        >>> reverse('stressed')
        'desserts'
        >>> reverse('cafe\\u0301') == 'e\\u0301fac'
        True
    """
    return ''.join(reversed(graphemes(text)))
