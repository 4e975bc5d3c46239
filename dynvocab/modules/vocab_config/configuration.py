"""
#WHERE
    Created by authors directly, by VocabHost.attach_new(), or declared as a
    subclass with a ``vocab_words`` class attribute and processed at start of
    day by VocabRegistry.

#WHAT
    VocabConfig: a parsed-once bundle of categorized words with an active
    flag (or condition) and a sort order.  Knows how to apply itself to a
    host's live vocabulary and how to retract the words no other active
    source still covers.  Host-agnostic: the host keeps the activation
    snapshot.

#INPUT
    Vocabulary string, order, active flag / condition callable.

#OUTPUT
    Word additions/removals on a VocabHost.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from dynvocab.shared.dictionary import DictionaryRegistrar, cmd_dict
from dynvocab.shared.settings import VocabSettings, resolve_settings
from dynvocab.modules.vocab_parser import VocabParser, VocabularySpec

from .shadow import ShadowEntity, ShadowEntityFactory, make_shadow_entity

log = logging.getLogger(__name__)


def normalize_order(value: Any, default: int) -> int:
    """Numeric orders pass through (floats truncated); anything else → *default*."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value != value:  # NaN
        return default
    return int(value)


class VocabConfig:
    """Set of words that can be switched on and off on one or more entities."""

    # Class-level declaration defaults: subclasses override these
    vocab_words: Optional[str] = None
    active: bool = False
    order: Any = None
    use_shadow_entity: Optional[bool] = None
    condition: Optional[Callable[[], bool]] = None

    def __init__(
        self,
        vocab_words: Optional[str] = None,
        *,
        active: Optional[bool] = None,
        order: Any = None,
        use_shadow_entity: Optional[bool] = None,
        condition: Optional[Callable[[], bool]] = None,
        name: Optional[str] = None,
        registrar: Optional[DictionaryRegistrar] = None,
        shadow_factory: Optional[ShadowEntityFactory] = None,
        settings: Optional[VocabSettings] = None,
    ) -> None:
        self.settings = resolve_settings(settings)
        self.name = name or type(self).__name__
        if active is not None:
            self.active = bool(active)
        if order is not None:
            self.order = order
        if use_shadow_entity is not None:
            self.use_shadow_entity = use_shadow_entity
        if condition is not None:
            self.condition = condition
        self._registrar = registrar
        self._shadow_factory = shadow_factory or make_shadow_entity
        self._spec: Optional[VocabularySpec] = None
        self.shadow: Optional[ShadowEntity] = None
        if vocab_words is not None:
            self.vocab_words = vocab_words
            self._parse()

    # -- spec --

    @property
    def is_parsed(self) -> bool:
        return self._spec is not None

    @property
    def spec(self) -> VocabularySpec:
        """Parsed words.  A config with no words yet reports an empty spec
        and stays open for configure()."""
        if self._spec is None:
            if self.vocab_words is None:
                return VocabularySpec()
            self._parse()
        return self._spec

    def configure(self, vocab_words: str) -> bool:
        if self._spec is not None:
            log.debug("%s: already parsed, ignoring %r", self.name, vocab_words)
            return False
        self.vocab_words = vocab_words
        self._parse()
        return True

    def _parse(self) -> None:
        self._spec = VocabParser(self.settings).parse(self.vocab_words)
        if self._spec.anomalies:
            log.debug("%s: %d vocabulary anomalies: %s",
                      self.name, len(self._spec.anomalies), "; ".join(self._spec.anomalies))
        if self._wants_shadow():
            self.shadow = self._shadow_factory(self, self.registrar)

    def _wants_shadow(self) -> bool:
        if self.use_shadow_entity is None:
            return self.settings.use_shadow_entity
        return bool(self.use_shadow_entity)

    @property
    def registrar(self) -> DictionaryRegistrar:
        return self._registrar if self._registrar is not None else cmd_dict

    # -- activity --

    def is_active(self) -> bool:
        if self.condition is None:
            return bool(self.active)
        try:
            return bool(self.condition())
        except Exception as exc:
            log.warning("%s: active condition failed (%s): treating as inactive", self.name, exc)
            return False

    def set_active(self, flag: bool) -> None:
        self.active = bool(flag)

    @property
    def sort_key(self) -> int:
        return normalize_order(self.order, self.settings.default_order)

    # -- host vocabulary --

    def apply_to(self, host) -> None:
        """Merge every word into *host*; the host dedupes."""
        for category, words in self.spec.items():
            for word in words:
                host.add_word(word, category)

    def remove_from(self, host) -> None:
        """Retract the words *host* no longer covers from any other source."""
        removed = 0
        for category, words in self.spec.items():
            for word in words:
                if host.has_vocab(category, word, exclude=self):
                    continue
                host.remove_word(word, category)
                removed += 1
        log.debug("%s: retracted %d of %d words from %s", self.name, removed, len(self.spec), host)

    def has_word(self, category, word: str) -> bool:
        return self.spec.has_word(category, word)

    def __repr__(self) -> str:
        return f"<VocabConfig {self.name} order={self.sort_key} active={self.is_active()}>"
