"""
Tests for Rule Priorities
=========================
Tests for the German override table, the confusion-rule family and the
rule/category fallback.
"""

import pytest

from langprofile import priority
from langprofile.priority import PRIORITY_OVERRIDES, priority_of, rule_priority

from .conftest import run_concurrently

EXPECTED_PRIORITIES = {
    "OLD_SPELLING_INTERNAL": 10,
    "ROCK_N_ROLL": 1,
    "DE_PROHIBITED_COMPOUNDS": 1,
    "ANS_OHNE_APOSTROPH": 1,
    "DIESEN_JAHRES": 1,
    "EBEN_FALLS": 1,
    "UST_ID": 1,
    "VER_INF_PKT_VER_INF": 1,
    "DASS_MIT_VERB": 1,
    "AB_TEST": 1,
    "BZGL_ABK": 1,
    "DURCH_WACHSEN": 1,
    "RUNDUM_SORGLOS_PAKET": 1,
    "MIT_FREUNDLICHEN_GRUESSE": 1,
    "DE_AGREEMENT": -1,
    "MEIN_KLEIN_HAUS": -1,
    "COMMA_IN_FRONT_RELATIVE_CLAUSE": -1,
    "MODALVERB_FLEKT_VERB": -1,
    "AKZENT_STATT_APOSTROPH": -1,
    "GERMAN_WORD_REPEAT_RULE": -1,
    "GERMAN_SPELLER_RULE": -3,
    "AUSTRIAN_GERMAN_SPELLER_RULE": -3,
    "SWISS_GERMAN_SPELLER_RULE": -3,
    "PUNCTUATION_PARAGRAPH_END": -4,
    "PUNKT_ENDE_ABSATZ": -10,
    "KOMMA_ZWISCHEN_HAUPT_UND_NEBENSATZ": -10,
    "KOMMA_VOR_RELATIVSATZ": -10,
    "COMMA_BEHIND_RELATIVE_CLAUSE": -10,
    "TOO_LONG_PARAGRAPH": -15,
    "COLLOQUIALISMS": -15,
    "REDUNDANCY": -15,
    "GENDER_NEUTRALITY": -15,
    "TYPOGRAPHY": -15,
}


class TestPriorityOf:
    """Tests for priority_of()."""

    @pytest.mark.parametrize("identifier,expected", [
        ("OLD_SPELLING_INTERNAL", 10),
        ("DE_PROHIBITED_COMPOUNDS", 1),
        ("MIT_FREUNDLICHEN_GRUESSE", 1),
        ("DE_AGREEMENT", -1),
        ("GERMAN_WORD_REPEAT_RULE", -1),
        ("GERMAN_SPELLER_RULE", -3),
        ("AUSTRIAN_GERMAN_SPELLER_RULE", -3),
        ("SWISS_GERMAN_SPELLER_RULE", -3),
        ("PUNCTUATION_PARAGRAPH_END", -4),
        ("PUNKT_ENDE_ABSATZ", -10),
        ("COMMA_BEHIND_RELATIVE_CLAUSE", -10),
        ("TOO_LONG_PARAGRAPH", -15),
        ("TYPOGRAPHY", -15),
        ("GENDER_NEUTRALITY", -15),
    ])
    def test_override_values(self, identifier, expected):
        assert priority_of(identifier) == expected

    def test_table_matches_expected(self):
        assert dict(PRIORITY_OVERRIDES) == EXPECTED_PRIORITIES

    @pytest.mark.parametrize("identifier,expected", sorted(EXPECTED_PRIORITIES.items()))
    def test_every_entry(self, identifier, expected):
        assert priority_of(identifier) == expected


    def test_table_size(self):
        assert len(PRIORITY_OVERRIDES) == 33

    def test_confusion_rule_family(self):
        assert priority_of("CONFUSION_RULE_XYZ") == -1
        assert priority_of("CONFUSION_RULE_SEID_SEIT") == -1

    def test_confusion_rule_base_id_is_not_in_family(self):
        # the family starts after the underscore
        assert priority_of("CONFUSION_RULE") == 0

    def test_unknown_ids_default_to_zero(self):
        assert priority_of("SOME_UNKNOWN_ID") == 0
        assert priority_of("") == 0
        assert priority_of("german_speller_rule") == 0

    def test_prefix_only_matches_at_start(self):
        assert priority_of("X_CONFUSION_RULE_ABC") == 0

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            PRIORITY_OVERRIDES['DE_CASE'] = 5

    def test_deterministic(self):
        first = [priority_of(i) for i in PRIORITY_OVERRIDES]
        second = [priority_of(i) for i in PRIORITY_OVERRIDES]
        assert first == second

    def test_concurrent_lookups(self):
        identifiers = list(EXPECTED_PRIORITIES) + ["CONFUSION_RULE_SEID_SEIT", "DE_CASE"]
        expected = list(EXPECTED_PRIORITIES.values()) + [-1, 0]

        def lookup_all():
            return [priority_of(i) for _ in range(50) for i in identifiers]

        results, errors = run_concurrently(lookup_all)
        assert errors == []
        assert all(r == expected * 50 for r in results)



class TestRulePriority:
    """Tests for rule_priority() and its category fallback."""

    def test_rule_priority_wins(self):
        assert rule_priority("GERMAN_SPELLER_RULE", "TYPOS") == -3

    def test_category_fallback(self):
        assert rule_priority("COMMA_PARENTHESIS_WHITESPACE", "TYPOGRAPHY") == -15

    def test_rule_priority_wins_over_category(self):
        assert rule_priority("OLD_SPELLING_INTERNAL", "TYPOGRAPHY") == 10

    def test_both_unknown(self):
        assert rule_priority("DE_CASE", "CASING") == priority.DEFAULT_PRIORITY
