"""
#WHERE
    Called by VocabConfig (its own words) and VocabHost (the entity's
    static vocabulary).  ``parse()`` is the module-level shortcut.

#WHAT
    Single-pass parser for the vocabulary mini-language:

        small round pebble/stone*pebbles stones
        (alien) artifact
        "No. 9" bob's -/key

    A space-separated run is adjectives up to its last token, which is the
    noun.  ``*`` starts plurals, ``/`` starts alternative nouns, ``-`` is an
    empty slot.  ``(word)`` is weak, ``"word"`` a literal adjective,
    ``word's`` a possessive adjective.  ``st.`` also yields ``st``.

#INPUT
    Vocabulary string.

#OUTPUT
    VocabularySpec.  Never raises: anomalies are logged and recorded.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from dynvocab.shared.constants import (
    POSSESSIVE_SUFFIX, PLACEHOLDER_TOKEN, PLURAL_DELIMITER, QUOTE,
    SECTION_DELIMITERS, SYNONYM_DELIMITER, WEAK_CLOSE, WEAK_OPEN,
)
from dynvocab.shared.settings import VocabSettings, resolve_settings
from dynvocab.shared.vocabulary import WordCategory, abbreviation_of, normalize_word

from .models import VocabularySpec

log = logging.getLogger(__name__)

# Everything up to the next whitespace or section delimiter
_TOKEN_RE = re.compile(r"[^\s" + re.escape(SECTION_DELIMITERS) + r"]*")


class VocabParser:
    """Rules-based vocabulary parser.  Permissive: malformed input degrades,
    it never aborts."""

    def __init__(self, settings: Optional[VocabSettings] = None) -> None:
        self.settings = resolve_settings(settings)

    def parse(self, text: str) -> VocabularySpec:
        if not isinstance(text, str):
            spec = VocabularySpec()
            self._note(spec, "non-string vocabulary %r treated as empty" % (text,))
            return spec

        spec = VocabularySpec(source=text)
        section = WordCategory.ADJECTIVE
        rest = text

        while rest:
            length = self._token_length(spec, rest)

            if length:
                token, after = rest[:length], rest[length:]
                # Last slot of a run (end of input, or a * or / follows) is the noun
                if section is WordCategory.ADJECTIVE and (
                    not after.strip() or after[0] in SECTION_DELIMITERS
                ):
                    section = WordCategory.NOUN
                if token != PLACEHOLDER_TOKEN:
                    self._add_token(spec, token, section)

            if length >= len(rest):
                break

            delimiter = rest[length]
            if delimiter == PLURAL_DELIMITER:
                section = WordCategory.PLURAL
            elif delimiter == SYNONYM_DELIMITER:
                section = WordCategory.NOUN
            elif not delimiter.isspace():
                # e.g. text glued to a closing quote: reparse it as the next token
                self._note(spec, "missing separator before %r" % rest[length:])
                rest = rest[length:]
                continue
            rest = rest[length + 1:].lstrip()

        spec._dedupe()
        return spec

    # -- tokenizing --

    def _token_length(self, spec: VocabularySpec, rest: str) -> int:
        if rest.startswith(QUOTE):
            close = rest.find(QUOTE, 1)
            if close == -1:
                self._note(spec, "unterminated quote in %r" % rest)
                return len(rest)
            return close + 1
        return _TOKEN_RE.match(rest).end()

    def _add_token(self, spec: VocabularySpec, token: str, section: WordCategory) -> None:
        category = section
        weak = False

        if len(token) >= 2 and token.startswith(WEAK_OPEN) and token.endswith(WEAK_CLOSE):
            token, weak = token[1:-1], True
        elif WEAK_OPEN in token or WEAK_CLOSE in token:
            self._note(spec, "unbalanced parenthesis in %r" % token)

        if token.startswith(QUOTE):
            token = token[1:-1] if len(token) > 1 and token.endswith(QUOTE) else token[1:]
            category = WordCategory.LITERAL_ADJECTIVE
        elif token.lower().endswith(POSSESSIVE_SUFFIX):
            token = token[: -len(POSSESSIVE_SUFFIX)]
            category = WordCategory.POSSESSIVE_ADJECTIVE

        if not token:
            self._note(spec, "empty word in %s section" % section.label)
            return

        word = normalize_word(token, self.settings.lowercase)
        spec._add(category, word)
        if weak:
            spec._add_weak(word)

        abbr = abbreviation_of(word) if self.settings.abbreviations else None
        if abbr:
            spec._add(category, abbr)
            if weak:
                spec._add_weak(abbr)

    @staticmethod
    def _note(spec: VocabularySpec, message: str) -> None:
        spec.anomalies.append(message)
        log.debug("vocab parse: %s", message)


_DEFAULT_PARSER = VocabParser()


def parse(text: str, settings: Optional[VocabSettings] = None) -> VocabularySpec:
    """Parse *text* with the default parser (or one built from *settings*)."""
    parser = _DEFAULT_PARSER if settings is None else VocabParser(settings)
    return parser.parse(text)
