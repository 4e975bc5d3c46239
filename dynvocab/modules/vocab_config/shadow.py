"""
#WHERE
    Used by configuration.py when a VocabConfig parses its words with
    use_shadow_entity enabled.

#WHAT
    ShadowEntity: inert placeholder that holds a configuration's words in
    the command dictionary, so vocabulary not currently on any live entity is
    still a known word.  ShadowEntityFactory protocol (Strategy interface)
    and the default factory.

#INPUT
    Owning VocabConfig, DictionaryRegistrar.

#OUTPUT
    ShadowEntity registered under every word of the configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from dynvocab.shared.dictionary import DictionaryRegistrar
from dynvocab.modules.vocab_parser.models import VocabularySpec

log = logging.getLogger(__name__)


@dataclass(eq=False, slots=True)
class ShadowEntity:
    config: Any                      # back-reference only, never owned
    vocab: VocabularySpec = field(default_factory=VocabularySpec)
    name: str = "shadow"

    @property
    def words(self) -> list[str]:
        return self.vocab.all_words()


class ShadowEntityFactory(Protocol):
    def __call__(self, config: Any, registrar: DictionaryRegistrar) -> ShadowEntity: ...


def make_shadow_entity(config: Any, registrar: DictionaryRegistrar) -> ShadowEntity:
    shadow = ShadowEntity(config=config, vocab=config.spec, name=f"{config.name}#shadow")
    for category, words in shadow.vocab.items():
        for word in words:
            registrar.add_word(shadow, word, category)
    log.debug("Shadow %s holds %d words", shadow.name, len(shadow.vocab))
    return shadow
