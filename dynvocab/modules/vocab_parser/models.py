"""
#WHERE
    Produced by parser.py; consumed by vocab_config (apply/remove, shadow
    entities) and vocab_host (static vocabulary, coverage checks).

#WHAT
    VocabularySpec: categorized word lists parsed from a vocabulary string,
    plus the weak (parenthesized) tokens and any parse anomalies.

#INPUT
    Words appended by the parser, category by category.

#OUTPUT
    Read-only views: words(category), categories, items(), all_words().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from dynvocab.shared.vocabulary import CATEGORIES, WordCategory


@dataclass(slots=True)
class VocabularySpec:
    source: str = ""
    entries: Dict[WordCategory, List[str]] = field(default_factory=dict)
    weak_tokens: List[str] = field(default_factory=list)
    anomalies: List[str] = field(default_factory=list)

    def words(self, category: WordCategory) -> List[str]:
        return list(self.entries.get(category, ()))

    def has_word(self, category: WordCategory, word: str) -> bool:
        return word in self.entries.get(category, ())

    def is_weak(self, word: str) -> bool:
        return word in self.weak_tokens

    @property
    def categories(self) -> List[WordCategory]:
        """Populated categories in canonical order."""
        return [c for c in CATEGORIES if self.entries.get(c)]

    def items(self) -> Iterator[Tuple[WordCategory, List[str]]]:
        for c in self.categories:
            yield c, list(self.entries[c])

    def all_words(self) -> List[str]:
        seen: List[str] = []
        for _, words in self.items():
            seen.extend(w for w in words if w not in seen)
        return seen

    @property
    def is_empty(self) -> bool:
        return not self.categories

    @property
    def nouns(self) -> List[str]:
        return self.words(WordCategory.NOUN)

    @property
    def adjectives(self) -> List[str]:
        return self.words(WordCategory.ADJECTIVE)

    @property
    def plurals(self) -> List[str]:
        return self.words(WordCategory.PLURAL)

    def __len__(self) -> int:
        return sum(len(w) for w in self.entries.values())

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        category, word = item
        return isinstance(category, WordCategory) and self.has_word(category, word)

    # -- parser-side mutation --

    def _add(self, category: WordCategory, word: str) -> None:
        self.entries.setdefault(category, []).append(word)

    def _add_weak(self, word: str) -> None:
        self.weak_tokens.append(word)

    def _dedupe(self) -> None:
        """Stable per-category uniquify: first occurrence wins."""
        for c, words in list(self.entries.items()):
            self.entries[c] = list(dict.fromkeys(words))
        self.weak_tokens = list(dict.fromkeys(self.weak_tokens))
