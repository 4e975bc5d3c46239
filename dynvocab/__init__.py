"""
#WHERE
    Top-level import for game code: ``from dynvocab import VocabHost, VocabConfig``.

#WHAT
    Runtime vocabulary tagging for text-adventure entities: parse word lists,
    switch them on and off per entity, retract only what nothing else covers.

#INPUT / #OUTPUT
    See the individual sub-modules for details.
"""

from .shared import (
    CommandDictionary, DictionaryRegistrar, StaticVocabularyAccessor, VocabSettings,
    WordCategory, cmd_dict,
)
from .modules.vocab_parser import VocabParser, VocabularySpec, parse
from .modules.vocab_config import ShadowEntity, VocabConfig
from .modules.vocab_host import VocabHost, VocabRegistry, host_of

__all__ = [
    "WordCategory", "VocabSettings", "DictionaryRegistrar", "StaticVocabularyAccessor",
    "CommandDictionary", "cmd_dict",
    "VocabParser", "VocabularySpec", "parse",
    "VocabConfig", "ShadowEntity",
    "VocabHost", "VocabRegistry", "host_of",
]
