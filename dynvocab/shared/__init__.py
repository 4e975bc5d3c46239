"""
#WHERE
    Imported by every dynvocab module and by tests.

#WHAT
    Shared word categories, defaults, settings and the command dictionary.

#INPUT
    None (constant registries).

#OUTPUT
    WordCategory enum, VocabSettings, DictionaryRegistrar protocol,
    CommandDictionary and the process-wide ``cmd_dict``.
"""

from .vocabulary import (
    WordCategory,
    CATEGORIES,
    CATEGORY_NAMES,
    get_category,
    get_category_names,
    normalize_word,
    abbreviation_of,
)
from .settings import VocabSettings, DEFAULT_SETTINGS, resolve_settings
from .dictionary import (
    DictionaryRegistrar, StaticVocabularyAccessor, CommandDictionary, cmd_dict,
)

__all__ = [
    "WordCategory",
    "CATEGORIES",
    "CATEGORY_NAMES",
    "get_category",
    "get_category_names",
    "normalize_word",
    "abbreviation_of",
    "VocabSettings",
    "DEFAULT_SETTINGS",
    "resolve_settings",
    "DictionaryRegistrar",
    "StaticVocabularyAccessor",
    "CommandDictionary",
    "cmd_dict",
]
