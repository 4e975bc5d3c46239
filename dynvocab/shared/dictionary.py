"""
#WHERE
    Used by VocabHost (live vocabulary changes), shadow entities
    (placeholder registration) and tests that inspect dictionary state.

#WHAT
    DictionaryRegistrar protocol (the narrow interface to the host parser's
    word index) and CommandDictionary, an in-memory word → (entity, category)
    index implementing it.  StaticVocabularyAccessor is the read side of an
    entity's own declared vocabulary.  ``cmd_dict`` is the process-wide default.

#INPUT
    (target entity, word, WordCategory) triples.

#OUTPUT
    Lookups: which entities a word resolves to, per category.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from .vocabulary import CATEGORIES, WordCategory

log = logging.getLogger(__name__)


class DictionaryRegistrar(Protocol):
    """Interface to the shared word index consulted by the command parser."""

    def add_word(self, target: Any, word: str, category: WordCategory) -> None: ...
    def remove_word(self, target: Any, word: str, category: WordCategory) -> None: ...


class StaticVocabularyAccessor(Protocol):
    """Read access to an entity's own declared vocabulary."""

    def static_words(self, category: WordCategory) -> Sequence[str]: ...


class CommandDictionary:
    """Word → [(entity, category)] index.  Add is idempotent, remove is
    remove-if-present.  Entities are compared by identity so unhashable
    game objects can be registered."""

    def __init__(self) -> None:
        self._entries: Dict[str, List[Tuple[Any, WordCategory]]] = {}

    def add_word(self, target: Any, word: str, category: WordCategory) -> None:
        entries = self._entries.setdefault(word, [])
        if any(t is target and c is category for t, c in entries):
            return
        entries.append((target, category))

    def remove_word(self, target: Any, word: str, category: WordCategory) -> None:
        entries = self._entries.get(word)
        if not entries:
            return
        kept = [(t, c) for t, c in entries if not (t is target and c is category)]
        if kept:
            self._entries[word] = kept
        else:
            del self._entries[word]

    # -- lookups --

    def find(self, word: str, category: Optional[WordCategory] = None) -> List[Any]:
        """Entities registered under *word*, optionally restricted to *category*."""
        found: List[Any] = []
        for t, c in self._entries.get(word, ()):
            if category is not None and c is not category:
                continue
            if not any(f is t for f in found):
                found.append(t)
        return found

    def is_defined(self, word: str, category: Optional[WordCategory] = None) -> bool:
        return bool(self.find(word, category))

    def has_entry(self, target: Any, word: str, category: WordCategory) -> bool:
        return any(t is target and c is category for t, c in self._entries.get(word, ()))

    def words_for(self, target: Any, category: Optional[WordCategory] = None) -> List[str]:
        return [
            w for w, entries in self._entries.items()
            if any(t is target and (category is None or c is category) for t, c in entries)
        ]

    def snapshot(self, target: Any) -> Dict[WordCategory, List[str]]:
        """Category → sorted words currently registered for *target*."""
        return {c: sorted(self.words_for(target, c)) for c in CATEGORIES}

    def clear(self) -> None:
        self._entries.clear()

    @property
    def word_count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return sum(len(e) for e in self._entries.values())


# Process-wide default used when no registrar is passed explicitly
cmd_dict = CommandDictionary()
