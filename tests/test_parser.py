"""Tests for the vocabulary mini-language parser."""

import pytest

from dynvocab.shared.settings import VocabSettings
from dynvocab.shared.vocabulary import WordCategory
from dynvocab.modules.vocab_parser import VocabParser, VocabularySpec, parse

NOUN = WordCategory.NOUN
ADJ = WordCategory.ADJECTIVE
PLURAL = WordCategory.PLURAL
POSS = WordCategory.POSSESSIVE_ADJECTIVE
LIT = WordCategory.LITERAL_ADJECTIVE


class TestWeakTokens:

    def test_weak_adjective_and_noun(self):
        spec = parse("(alien) artifact")
        assert spec.words(ADJ) == ["alien"]
        assert spec.words(NOUN) == ["artifact"]
        assert spec.weak_tokens == ["alien"]

    def test_two_weak_adjectives(self):
        spec = parse("(small) (round) pebble")
        assert spec.words(ADJ) == ["small", "round"]
        assert spec.words(NOUN) == ["pebble"]
        assert spec.weak_tokens == ["small", "round"]
        assert spec.is_weak("round")
        assert not spec.is_weak("pebble")

    def test_weak_noun_keeps_its_category(self):
        spec = parse("brass (lamp)")
        assert spec.words(NOUN) == ["lamp"]
        assert spec.weak_tokens == ["lamp"]

    def test_empty_parens_are_skipped(self):
        spec = parse("() box")
        assert spec.words(NOUN) == ["box"]
        assert spec.words(ADJ) == []
        assert spec.anomalies

    def test_unbalanced_paren_is_kept_verbatim(self):
        spec = parse("(big box")
        assert spec.words(ADJ) == ["(big"]
        assert any("parenthesis" in a for a in spec.anomalies)


class TestNounPosition:

    def test_single_word_is_noun(self):
        spec = parse("lamp")
        assert spec.words(NOUN) == ["lamp"]
        assert spec.words(ADJ) == []

    def test_last_word_of_run_is_noun(self):
        spec = parse("small red ball")
        assert spec.words(ADJ) == ["small", "red"]
        assert spec.words(NOUN) == ["ball"]

    def test_trailing_whitespace_still_ends_run(self):
        spec = parse("red ball   ")
        assert spec.words(NOUN) == ["ball"]

    def test_leading_and_repeated_spaces(self):
        spec = parse("   old   oak  door")
        assert spec.words(ADJ) == ["old", "oak"]
        assert spec.words(NOUN) == ["door"]

    def test_tabs_and_newlines_separate_tokens(self):
        spec = parse("old\toak\ndoor")
        assert spec.words(ADJ) == ["old", "oak"]
        assert spec.words(NOUN) == ["door"]

    def test_slash_synonyms_are_nouns(self):
        spec = parse("small round pebble/stone/rock")
        assert spec.words(ADJ) == ["small", "round"]
        assert spec.words(NOUN) == ["pebble", "stone", "rock"]

    def test_space_after_slash_is_skipped(self):
        spec = parse("pebble/ stone")
        assert spec.words(NOUN) == ["pebble", "stone"]

    def test_noun_section_persists_over_spaces(self):
        spec = parse("red ball/sphere orb")
        assert spec.words(NOUN) == ["ball", "sphere", "orb"]
        assert spec.words(ADJ) == ["red"]


class TestPlurals:

    def test_star_starts_plurals(self):
        spec = parse("cat* cats")
        assert spec.words(NOUN) == ["cat"]
        assert spec.words(PLURAL) == ["cats"]

    def test_plurals_are_deduplicated(self):
        spec = parse("cat*cats felines cats")
        assert spec.words(PLURAL) == ["cats", "felines"]

    def test_trailing_star_ends_parse(self):
        spec = parse("cat*")
        assert spec.words(NOUN) == ["cat"]
        assert spec.words(PLURAL) == []

    def test_full_declaration(self):
        spec = parse("small round pebble/stone*pebbles stones")
        assert spec.words(ADJ) == ["small", "round"]
        assert spec.words(NOUN) == ["pebble", "stone"]
        assert spec.words(PLURAL) == ["pebbles", "stones"]
        assert spec.categories == [NOUN, ADJ, PLURAL]

    def test_leading_star(self):
        spec = parse("*coins")
        assert spec.words(PLURAL) == ["coins"]
        assert spec.words(NOUN) == []


class TestSpecialForms:

    def test_quoted_literal_adjective(self):
        spec = parse('"9" button')
        assert spec.words(LIT) == ["9"]
        assert spec.words(NOUN) == ["button"]
        assert spec.words(ADJ) == []

    def test_quoted_literal_may_contain_spaces(self):
        spec = parse('"no entry" sign')
        assert spec.words(LIT) == ["no entry"]
        assert spec.words(NOUN) == ["sign"]

    def test_unterminated_quote_runs_to_end(self):
        spec = parse('sign "no entry')
        assert spec.words(LIT) == ["no entry"]
        assert spec.words(ADJ) == ["sign"]
        assert any("unterminated" in a for a in spec.anomalies)

    def test_text_glued_to_closing_quote(self):
        spec = parse('"x"ray')
        assert spec.words(LIT) == ["x"]
        assert spec.words(NOUN) == ["ray"]
        assert spec.anomalies

    def test_possessive_adjective(self):
        spec = parse("bob's wallet")
        assert spec.words(POSS) == ["bob"]
        assert spec.words(NOUN) == ["wallet"]

    def test_possessive_suffix_ignores_case(self):
        spec = parse("BOB'S wallet")
        assert spec.words(POSS) == ["bob"]
        assert spec.words(ADJ) == []

    def test_bare_apostrophe_s_is_empty(self):
        spec = parse("'s wallet")
        assert spec.words(POSS) == []
        assert spec.words(NOUN) == ["wallet"]

    def test_weak_literal(self):
        spec = parse('("x") marks')
        assert spec.words(LIT) == ["x"]
        assert spec.weak_tokens == ["x"]


class TestPlaceholderAndAbbreviation:

    def test_placeholder_flips_to_noun_without_word(self):
        spec = parse("-/key")
        assert spec.words(NOUN) == ["key"]
        assert spec.words(ADJ) == []

    def test_placeholder_in_adjective_run(self):
        spec = parse("brass - key")
        assert spec.words(ADJ) == ["brass"]
        assert spec.words(NOUN) == ["key"]

    def test_only_placeholders_is_empty(self):
        spec = parse("- - -")
        assert spec.is_empty
        assert len(spec) == 0

    def test_trailing_period_adds_abbreviation(self):
        spec = parse("rock. ")
        assert spec.words(NOUN) == ["rock.", "rock"]

    def test_abbreviation_stays_in_category(self):
        spec = parse("st. george")
        assert spec.words(ADJ) == ["st.", "st"]
        assert spec.words(NOUN) == ["george"]

    def test_weak_abbreviation_is_weak_too(self):
        spec = parse("(st.) george")
        assert spec.words(ADJ) == ["st.", "st"]
        assert spec.weak_tokens == ["st.", "st"]

    def test_abbreviations_can_be_disabled(self):
        spec = VocabParser(VocabSettings(abbreviations=False)).parse("rock.")
        assert spec.words(NOUN) == ["rock."]


class TestNormalization:

    def test_words_are_lowercased(self):
        spec = parse("Brass LAMP")
        assert spec.words(ADJ) == ["brass"]
        assert spec.words(NOUN) == ["lamp"]

    def test_lowercase_can_be_disabled(self):
        spec = parse("Brass Lamp", settings=VocabSettings(lowercase=False))
        assert spec.words(NOUN) == ["Lamp"]

    def test_duplicates_collapse_first_wins(self):
        spec = parse("red big red ball/ball/orb")
        assert spec.words(ADJ) == ["red", "big"]
        assert spec.words(NOUN) == ["ball", "orb"]

    def test_same_word_in_two_categories(self):
        spec = parse("light light")
        assert spec.words(ADJ) == ["light"]
        assert spec.words(NOUN) == ["light"]


class TestEmptyAndInvalid:

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_input(self, text):
        spec = parse(text)
        assert spec.is_empty
        assert spec.categories == []
        assert spec.weak_tokens == []

    def test_none_input_does_not_raise(self):
        spec = parse(None)
        assert isinstance(spec, VocabularySpec)
        assert spec.is_empty
        assert spec.anomalies

    def test_source_is_kept(self):
        assert parse("red ball").source == "red ball"


class TestVocabularySpec:

    def test_spec_is_slotted(self):
        spec = VocabularySpec()
        assert not hasattr(spec, "__dict__")
        with pytest.raises(AttributeError):
            spec.extra = 1

    def test_contains_category_word_pairs(self):
        spec = parse("red ball")
        assert (NOUN, "ball") in spec
        assert (ADJ, "ball") not in spec
        assert "ball" not in spec

    def test_all_words_unique_in_category_order(self):
        spec = parse("light red light*lights")
        assert spec.all_words() == ["light", "red", "lights"]

    def test_shortcut_properties(self):
        spec = parse("red ball*balls")
        assert spec.nouns == ["ball"]
        assert spec.adjectives == ["red"]
        assert spec.plurals == ["balls"]

    def test_words_returns_copy(self):
        spec = parse("ball")
        spec.words(NOUN).append("orb")
        assert spec.words(NOUN) == ["ball"]
