"""
#WHERE
    Imported by shared/__init__.py → re-exported to the parser, the
    configuration and host modules, and the command dictionary.

#WHAT
    Single source of truth for the word categories a vocabulary entry can be
    registered under, plus the word normalization shared by every module.

#INPUT
    None (constant definitions).

#OUTPUT
    WordCategory enum, CATEGORY_NAMES lookup, normalize_word / abbreviation
    helpers.
"""

from enum import Enum, auto
from typing import Optional

from .constants import ABBREVIATION_MARK


class WordCategory(Enum):
    NOUN                 = auto()
    ADJECTIVE            = auto()
    PLURAL               = auto()
    POSSESSIVE_ADJECTIVE = auto()
    LITERAL_ADJECTIVE    = auto()

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")


# Canonical iteration order: apply/remove walk categories in this order
CATEGORIES: tuple[WordCategory, ...] = tuple(WordCategory)


CATEGORY_NAMES: dict[str, WordCategory] = {
    "noun":                 WordCategory.NOUN,
    "nouns":                WordCategory.NOUN,
    "adjective":            WordCategory.ADJECTIVE,
    "adjectives":           WordCategory.ADJECTIVE,
    "adj":                  WordCategory.ADJECTIVE,
    "plural":               WordCategory.PLURAL,
    "plurals":              WordCategory.PLURAL,
    "possessive":           WordCategory.POSSESSIVE_ADJECTIVE,
    "possessive adjective": WordCategory.POSSESSIVE_ADJECTIVE,
    "adjaposts":            WordCategory.POSSESSIVE_ADJECTIVE,
    "literal":              WordCategory.LITERAL_ADJECTIVE,
    "literal adjective":    WordCategory.LITERAL_ADJECTIVE,
}

_COMPACT_NAMES: dict[str, WordCategory] = {k.replace(" ", ""): v for k, v in CATEGORY_NAMES.items()}


def get_category(value) -> Optional[WordCategory]:
    """Resolve a WordCategory from an enum member or one of its names."""
    if isinstance(value, WordCategory):
        return value
    if not isinstance(value, str):
        return None
    key = value.strip().lower().replace("_", " ")
    return CATEGORY_NAMES.get(key) or _COMPACT_NAMES.get(key.replace(" ", ""))


def normalize_word(word: str, lowercase: bool = True) -> str:
    return word.lower() if lowercase else word


def abbreviation_of(word: str) -> Optional[str]:
    """'st.' → 'st'.  None when the word has no trailing period to drop."""
    if len(word) > 1 and word.endswith(ABBREVIATION_MARK):
        return word[:-1]
    return None


def get_category_names() -> list[str]:
    return [c.label for c in CATEGORIES]
