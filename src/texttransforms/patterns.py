"""Constants and compiled patterns shared by the transformation modules.
"""

__docformat__ = 'google'

import regex

## Word splitting
WORD_SEPARATOR: str = " "
"""Separator used to split words for title, camel and pascal case.

Only the ASCII space counts as a separator. Tabs, newlines and other Unicode
whitespace are treated as part of a word."""

SNAKE_SEPARATOR: str = "_"
"""Replacement for every `WORD_SEPARATOR` in snake case."""

KEBAB_SEPARATOR: str = "-"
"""Replacement for every `WORD_SEPARATOR` in kebab case."""

CAPITALIZE_WORD_PATTERN: regex.Pattern = regex.compile(r"(\s+)")
"""Compiled regex matching runs of whitespace between capitalized words.

The capturing group keeps the separators in the output of `split`, so the
original spacing survives capitalization.

Used in `texttransforms.casing.capitalize`."""

## Content edits
ELLIPSIS: str = "..."
"""Suffix appended by `texttransforms.editing.truncate` when ellipsis is requested."""

DEFAULT_TRUNCATE_LENGTH: int = 200
"""Number of user-perceived characters kept by default when truncating."""

DEFAULT_CHARACTER_SET: str = "whitespace"
"""Name of the character set trimmed by default.

Character sets are defined in `texttransforms/data/character_sets.yaml`."""

GRAPHEME_PATTERN: regex.Pattern = regex.compile(r"\X")
"""Compiled regex matching a single extended grapheme cluster.

Used in `texttransforms.editing.graphemes`, which backs bounded replacement,
truncation and reversal."""

## Locales
SPECIAL_CASING_LANGUAGES: dict = {
    'tr': 'turkic',
    'az': 'turkic',
    'lt': 'lithuanian'
}
"""Languages with locale-sensitive casing rules and the rule family they use.

Languages not listed here fall back to the default Unicode case mapping."""

LOCALE_SEPARATOR_PATTERN: regex.Pattern = regex.compile(r"[-_.@]")
"""Compiled regex matching the separators in a POSIX or BCP 47 locale id.

Used in `texttransforms.casing.LocaleAware.language`."""
