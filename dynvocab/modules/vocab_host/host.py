"""
#WHERE
    Held by any taggable game entity (``entity.vocab_host``); driven by
    author code, VocabRegistry.start_of_day() and periodic synchronize().

#WHAT
    VocabHost: capability component that tracks which VocabConfigs an
    entity has attached and which of them are applied, keeps the entity's
    dictionary entries in step with that state, and answers coverage
    queries ("does anything still declare this word?") for reconciled
    removal.

#INPUT
    VocabConfig instances; the entity's own static vocabulary string.

#OUTPUT
    DictionaryRegistrar add/remove calls keyed by the entity; boolean
    results for every state change (False = no-op).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from dynvocab.shared.constants import HOST_ATTRIBUTE
from dynvocab.shared.dictionary import DictionaryRegistrar, StaticVocabularyAccessor, cmd_dict
from dynvocab.shared.settings import VocabSettings, resolve_settings
from dynvocab.shared.vocabulary import CATEGORIES, WordCategory, get_category
from dynvocab.modules.vocab_parser import VocabParser, VocabularySpec
from dynvocab.modules.vocab_config import VocabConfig

log = logging.getLogger(__name__)


class VocabHost:
    """Dynamic-vocabulary capability for one entity."""

    def __init__(
        self,
        entity: Any,
        vocab_words: Optional[str] = None,
        *,
        registrar: Optional[DictionaryRegistrar] = None,
        settings: Optional[VocabSettings] = None,
        static_vocab: Optional[StaticVocabularyAccessor] = None,
    ) -> None:
        self.entity = entity
        self.settings = resolve_settings(settings)
        self._registrar = registrar if registrar is not None else cmd_dict
        self._static: VocabularySpec = (
            VocabParser(self.settings).parse(vocab_words) if vocab_words else VocabularySpec()
        )
        # Engine-supplied declared vocabulary takes precedence over vocab_words
        self._static_source = static_vocab
        self._live: Dict[WordCategory, List[str]] = {c: [] for c in CATEGORIES}
        self._configs: List[VocabConfig] = []
        self._by_order: List[VocabConfig] = []
        self._order_valid = False
        self._last_active: Dict[VocabConfig, bool] = {}

        for category in CATEGORIES:
            for word in self.static_words(category):
                self.add_word(word, category)

    # -- static / live vocabulary --

    @property
    def registrar(self) -> DictionaryRegistrar:
        return self._registrar

    @property
    def static_vocab(self) -> VocabularySpec:
        return self._static

    def static_words(self, category: WordCategory) -> List[str]:
        if self._static_source is not None:
            return list(self._static_source.static_words(category))
        return self._static.words(category)

    def words(self, category: WordCategory) -> List[str]:
        """Words the entity currently answers to in *category*."""
        return list(self._live[category])

    @property
    def weak_tokens(self) -> List[str]:
        weak = list(self._static.weak_tokens)
        for cfg in self.active_configs():
            weak.extend(w for w in cfg.spec.weak_tokens if w not in weak)
        return weak

    def add_word(self, word: str, category: WordCategory) -> None:
        live = self._live[category]
        if word not in live:
            live.append(word)
        self._registrar.add_word(self.entity, word, category)

    def remove_word(self, word: str, category: WordCategory) -> None:
        live = self._live[category]
        if word in live:
            live.remove(word)
        self._registrar.remove_word(self.entity, word, category)

    # -- attachment --

    @property
    def attached_configs(self) -> List[VocabConfig]:
        return list(self._configs)

    def is_attached(self, cfg: Any) -> bool:
        return any(c is cfg for c in self._configs)

    def is_applied(self, cfg: Any) -> bool:
        return self._last_active.get(cfg, False) if isinstance(cfg, VocabConfig) else False

    def active_configs(self) -> List[VocabConfig]:
        return [c for c in self._configs if self._last_active.get(c)]

    def attach(self, cfg: Any) -> bool:
        if not isinstance(cfg, VocabConfig):
            log.warning("attach: %r is not a VocabConfig", cfg)
            return False
        if self.is_attached(cfg):
            log.debug("attach: %s already on %r", cfg.name, self.entity)
            return False
        self._configs.append(cfg)
        self._last_active[cfg] = False
        self._order_valid = False
        log.debug("attached %s to %r", cfg.name, self.entity)
        if cfg.is_active():
            self.activate(cfg)
        return True

    def attach_new(self, vocab_words: str, **kwargs: Any) -> VocabConfig:
        """Build a VocabConfig sharing this host's registrar and attach it."""
        kwargs.setdefault("registrar", self._registrar)
        kwargs.setdefault("settings", self.settings)
        cfg = VocabConfig(vocab_words, **kwargs)
        self.attach(cfg)
        return cfg

    def detach(self, cfg: Any) -> bool:
        if not isinstance(cfg, VocabConfig):
            log.warning("detach: %r is not a VocabConfig", cfg)
            return False
        if not self.is_attached(cfg):
            log.debug("detach: %s not on %r", cfg.name, self.entity)
            return False
        if self._last_active.get(cfg):
            self.deactivate(cfg)
        self._configs = [c for c in self._configs if c is not cfg]
        self._last_active.pop(cfg, None)
        self._order_valid = False
        log.debug("detached %s from %r", cfg.name, self.entity)
        return True

    # -- activation --

    def activate(self, cfg: Any) -> bool:
        if not isinstance(cfg, VocabConfig):
            log.warning("activate: %r is not a VocabConfig", cfg)
            return False
        if not self.is_attached(cfg):
            log.debug("activate: %s not on %r", cfg.name, self.entity)
            return False
        cfg.apply_to(self)
        cfg.set_active(True)
        self._last_active[cfg] = True
        log.debug("activated %s on %r", cfg.name, self.entity)
        return True

    def deactivate(self, cfg: Any) -> bool:
        if not isinstance(cfg, VocabConfig):
            log.warning("deactivate: %r is not a VocabConfig", cfg)
            return False
        if not self._last_active.get(cfg):
            log.debug("deactivate: %s not active on %r", cfg.name, self.entity)
            return False
        cfg.set_active(False)
        self._last_active[cfg] = False
        cfg.remove_from(self)
        log.debug("deactivated %s on %r", cfg.name, self.entity)
        return True

    def synchronize(self) -> int:
        """Bring applied state in line with each config's is_active().
        Returns the number of transitions performed."""
        changed = 0
        for cfg in list(self._configs):
            live, known = cfg.is_active(), self._last_active.get(cfg, False)
            if live and not known:
                changed += self.activate(cfg)
            elif known and not live:
                changed += self.deactivate(cfg)
        if changed:
            log.debug("synchronize %r: %d transitions", self.entity, changed)
        return changed

    # -- queries --

    def has_vocab(self, category: Any, word: str, exclude: Optional[VocabConfig] = None) -> bool:
        """True when the static vocabulary or an attached, active config declares
        *word*.  *exclude* is left out of the check (the config being retracted)."""
        category = get_category(category)
        if category is None:
            return False
        if word in self.static_words(category):
            return True
        return any(
            cfg is not exclude and cfg.is_active() and cfg.has_word(category, word)
            for cfg in self._configs
        )

    def select_active_config(self) -> Optional[VocabConfig]:
        """Highest-order active config; ties go to the earliest attached."""
        if not self._order_valid:
            self._by_order = sorted(self._configs, key=lambda c: -c.sort_key)
            self._order_valid = True
        return next((c for c in self._by_order if c.is_active()), None)

    def __repr__(self) -> str:
        return f"<VocabHost {self.entity!r} configs={len(self._configs)}>"


def host_of(obj: Any) -> Optional[VocabHost]:
    """The VocabHost for *obj*: the host itself, or the entity's component."""
    if isinstance(obj, VocabHost):
        return obj
    host = getattr(obj, HOST_ATTRIBUTE, None)
    return host if isinstance(host, VocabHost) else None
