"""
#WHERE
    Imported by vocab_config, vocab_host and tests.

#WHAT
    Vocabulary Parser: turns a vocabulary mini-language string into
    categorized word lists plus weak tokens.

#INPUT
    Vocabulary string, e.g. "(small) round pebble/stone*pebbles".

#OUTPUT
    VocabularySpec.
"""

from .models import VocabularySpec
from .parser import VocabParser, parse

__all__ = ["VocabParser", "VocabularySpec", "parse"]
