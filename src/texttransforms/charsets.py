"""Character sets used to decide which characters `texttransforms.editing.trim` removes.

A `CharacterSet` is a predicate over single code points. Sets are built from
Unicode general categories, from explicit characters, or both. The named sets
shipped with the package are defined in `texttransforms/data/character_sets.yaml`.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'CharacterSet',

    # Functions
    'resolve_character_set'
]

import unicodedata
from dataclasses import dataclass, field
from functools import cache
from typing import FrozenSet, Iterable, Union
from texttransforms.lookups import CharacterSetData

@cache
def _character_set_data() -> CharacterSetData:
    return CharacterSetData()

@dataclass(frozen=True)
class CharacterSet:
    """
    An immutable set of code points.

    Args:
        categories: Unicode general categories (`Zs`) or major classes (`P`)
        characters: Individual code points

    Example:
        >>> ' ' in CharacterSet.named('whitespace')
        True
        >>> '-' in CharacterSet.of('-_')
        True
        >>> 'x' in CharacterSet.of('-_') | CharacterSet.named('punctuation')
        False
    """
    categories: FrozenSet[str] = field(default_factory=frozenset)
    characters: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, 'categories', frozenset(self.categories))
        object.__setattr__(self, 'characters', frozenset(self.characters))

    def __contains__(self, char: str) -> bool:
        if char in self.characters:
            return True
        if len(char) != 1 or not self.categories:
            return False
        category = unicodedata.category(char)
        return category in self.categories or category[0] in self.categories

    def __or__(self, other: 'CharacterSet') -> 'CharacterSet':
        if not isinstance(other, CharacterSet):
            return NotImplemented
        return CharacterSet(
            self.categories | other.categories,
            self.characters | other.characters
        )

    @classmethod
    def of(cls, characters: Iterable[str]) -> 'CharacterSet':
        """Build a set from explicit characters, e.g. `CharacterSet.of('.,;')`."""
        return cls(characters=frozenset(characters))

    @classmethod
    def named(cls, name: str) -> 'CharacterSet':
        """
        Look up a character set shipped with the package.

        Args:
            name: One of the names in `texttransforms/data/character_sets.yaml`,
                such as `whitespace`, `newlines` or `punctuation`

        Raises:
            KeyError: If no set with that name exists.
        """
        data = _character_set_data()
        if name not in data.definitions:
            raise KeyError(f"Unknown character set '{name}'. Available: {', '.join(data.names)}")
        return cls(data.categories(name), data.characters(name))

def resolve_character_set(characters: Union[str, CharacterSet]) -> CharacterSet:
    """
    Accept either a set name or a `CharacterSet`.

    Example:
        >>> resolve_character_set('decimal_digits') == CharacterSet(categories={'Nd'})
        True
    """
    if isinstance(characters, CharacterSet):
        return characters
    return CharacterSet.named(characters)
