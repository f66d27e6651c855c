"""
Tests for the German Language Profiles
======================================
Tests for identity, resource ownership, teardown and typography.
"""

import time

import pytest

from langprofile.errors import ResourceUnavailableError
from langprofile.profile import AustrianGerman, German, GermanyGerman, SwissGerman
from langprofile.resources import ResourceLoaders
from langprofile.resources.ngram import NgramLanguageModel
from langprofile.rules.spelling import GermanSpellerRule

from .conftest import CountingLoader, FakeHandle, run_concurrently


class BrokenHandle(FakeHandle):
    """Handle whose close() fails after recording the call."""

    def close(self):
        super().close()
        raise OSError("index file still locked")


@pytest.fixture
def ngram_root(tmp_path):
    """An n-gram index with the German 1/2/3-gram directories."""
    root = tmp_path / "ngrams"
    for name in ("1grams", "2grams", "3grams"):
        (root / "de" / name).mkdir(parents=True)
    return root


class TestIdentity:
    """Tests for the language metadata."""

    def test_german(self, german):
        assert german.name == "German"
        assert german.short_code == "de"
        assert german.language_code == "de"
        assert german.countries == ["LU", "LI", "BE"]
        assert german.maintained_state == "ActivelyMaintained"
        assert "Daniel Naber" in german.maintainers

    @pytest.mark.parametrize("cls,code,country", [
        (GermanyGerman, "de-DE", "DE"),
        (AustrianGerman, "de-AT", "AT"),
        (SwissGerman, "de-CH", "CH"),
    ])
    def test_variants(self, profile_config, loaders, cls, code, country):
        profile = cls(profile_config, loaders)
        assert profile.short_code == "de"
        assert profile.language_code == code
        assert profile.countries == [country]
        assert profile.default_variant is None

    def test_default_variant(self, german):
        variant = german.default_variant
        assert isinstance(variant, GermanyGerman)
        assert german.default_variant is variant

    def test_default_variant_built_once_under_contention(self, german, monkeypatch):
        import langprofile.profile as profile_module
        built = []

        class SlowGermanyGerman(GermanyGerman):
            def __init__(self, *args, **kwargs):
                time.sleep(0.02)
                super().__init__(*args, **kwargs)
                built.append(self)

        monkeypatch.setattr(profile_module, "GermanyGerman", SlowGermanyGerman)
        results, errors = run_concurrently(lambda: german.default_variant)
        assert errors == []
        assert len(built) == 1
        assert all(r is built[0] for r in results)


    def test_quotes(self, german):
        assert german.OPENING_DOUBLE_QUOTE == "„"
        assert german.CLOSING_DOUBLE_QUOTE == "“"
        assert german.OPENING_SINGLE_QUOTE == "‚"
        assert german.CLOSING_SINGLE_QUOTE == "‘"
        assert german.is_advanced_typography_enabled


class TestPriorities:
    """Tests for priority queries through the profile."""

    def test_priority_of(self, german):
        assert german.priority_of("GERMAN_SPELLER_RULE") == -3
        assert german.priority_of("TOO_LONG_PARAGRAPH") == -15
        assert german.priority_of("CONFUSION_RULE_XYZ") == -1
        assert german.priority_of("SOME_UNKNOWN_ID") == 0

    def test_rule_priority_uses_category(self, german, context):
        rules = {r.rule_id: r for r in german.build_base_checkers(context)}
        assert german.rule_priority(rules["COMMA_PARENTHESIS_WHITESPACE"]) == -15
        assert german.rule_priority(rules["OLD_SPELLING_INTERNAL"]) == 10
        assert german.rule_priority(rules["DE_CASE"]) == 0

    def test_rule_priority_of_speller(self, profile_config, loaders):
        profile = GermanyGerman(profile_config, loaders)
        speller = GermanSpellerRule(profile.create_context())
        assert profile.rule_priority(speller) == -3


class TestSharedResources:
    """Tests for the resource accessors of a profile."""

    def test_language_model_loaded_once(self, german, loaders):
        first = german.get_language_model()
        second = german.get_language_model()
        assert first is second
        assert loaders.language_model.calls == 1

    def test_language_model_path(self, german, profile_config):
        handle = german.get_language_model()
        assert str(handle.locator[0]).endswith("ngrams/de")

    def test_language_model_explicit_index_dir(self, german):
        handle = german.get_language_model("/data/other")
        assert str(handle.locator[0]).replace("\\", "/") == "/data/other/de"

    def test_concurrent_language_model(self, german, loaders):
        loaders.language_model.delay = 0.05
        results, errors = run_concurrently(german.get_language_model, count=12)
        assert errors == []
        assert loaders.language_model.calls == 1
        assert all(r is results[0] for r in results)

    def test_missing_location_raises(self, loaders):
        from langprofile.config import ProfileConfig
        profile = German(ProfileConfig(), loaders)
        with pytest.raises(ResourceUnavailableError):
            profile.get_language_model()
        with pytest.raises(ResourceUnavailableError):
            profile.get_word2vec_model()
        with pytest.raises(ResourceUnavailableError):
            profile.get_strict_compound_tokenizer()
        assert loaders.language_model.calls == 0

    def test_failed_load_retried(self, german, loaders):
        loaders.language_model.failures = 1
        with pytest.raises(OSError):
            german.get_language_model()
        assert german.get_language_model() is not None
        assert loaders.language_model.calls == 2

    def test_compound_tokenizers_are_distinct(self, german, loaders):
        strict = german.get_strict_compound_tokenizer()
        lenient = german.get_non_strict_compound_splitter()
        assert strict is not lenient
        assert strict.locator[0] is True
        assert lenient.locator[0] is False
        assert german.get_strict_compound_tokenizer() is strict
        assert loaders.compound_tokenizer.calls == 2

    def test_grammar_backend_uses_variant_code(self, profile_config, loaders):
        profile = AustrianGerman(profile_config, loaders)
        backend = profile.get_grammar_backend()
        assert backend.locator[0] == "de-AT"
        assert backend.locator[1] is profile_config.languagetool

    def test_tagger_and_sentence_tokenizer_are_separate(self, german, loaders):
        tagger = german.get_tagger()
        tokenizer = german.get_sentence_tokenizer()
        assert tagger is not tokenizer
        assert tokenizer.locator == (None,)
        assert loaders.spacy_pipeline.calls == 2

    def test_real_language_model_feeds_checkers(self, profile_config, ngram_root):
        profile = German(profile_config, ResourceLoaders())
        model = profile.get_language_model()
        assert isinstance(model, NgramLanguageModel)
        rules = profile.build_language_model_checkers(profile.create_context(), model)
        assert all(r.language_model is model for r in rules)
        profile.close()
        assert model.is_closed

    def test_real_language_model_missing_dirs(self, profile_config, tmp_path):
        (tmp_path / "ngrams" / "de" / "1grams").mkdir(parents=True)
        profile = German(profile_config, ResourceLoaders())
        with pytest.raises(ResourceUnavailableError):
            profile.get_language_model()


class TestTeardown:
    """Tests for close() and the context manager."""

    def test_close_releases_everything(self, german):
        handles = [
            german.get_language_model(),
            german.get_word2vec_model(),
            german.get_grammar_backend(),
            german.get_tagger(),
            german.get_sentence_tokenizer(),
            german.get_strict_compound_tokenizer(),
            german.get_non_strict_compound_splitter(),
        ]
        german.close()
        assert all(h.close_calls == 1 for h in handles)
        assert not any(s['loaded'] for s in german.get_status()['resources'].values())

    def test_close_twice(self, german):
        handle = german.get_language_model()
        german.close()
        german.close()
        assert handle.close_calls == 1

    def test_close_closes_default_variant(self, german):
        variant = german.default_variant
        backend = variant.get_grammar_backend()
        german.close()
        assert backend.is_closed

    def test_close_continues_past_failing_release(self, profile_config, loaders):
        loaders.language_model = CountingLoader(BrokenHandle)
        profile = German(profile_config, loaders)
        broken = profile.get_language_model()
        others = [
            profile.get_word2vec_model(),
            profile.get_grammar_backend(),
            profile.get_strict_compound_tokenizer(),
        ]
        with pytest.raises(OSError, match="still locked"):
            profile.close()
        assert broken.close_calls == 1
        assert all(h.is_closed for h in others)
        assert profile.get_status()['closed']
        profile.close()
        assert broken.close_calls == 1

    def test_failing_release_still_closes_default_variant(self, profile_config, loaders):
        loaders.language_model = CountingLoader(BrokenHandle)
        profile = German(profile_config, loaders)
        profile.get_language_model()
        backend = profile.default_variant.get_grammar_backend()
        with pytest.raises(OSError):
            profile.close()
        assert backend.is_closed

    def test_context_manager(self, profile_config, loaders):

        with German(profile_config, loaders) as profile:
            handle = profile.get_language_model()
        assert handle.is_closed

    def test_reload_after_close(self, german, loaders):
        first = german.get_language_model()
        german.close()
        second = german.get_language_model()
        assert second is not first
        assert loaders.language_model.calls == 2

    def test_status(self, german):
        german.get_language_model()
        status = german.get_status()
        assert status['language_code'] == "de"
        assert status['resources']['language_model']['loaded']
        assert status['catalog']['base'] == 38


class TestTypography:
    """Tests for to_advanced_typography()."""

    def test_double_quotes(self, german):
        assert german.to_advanced_typography('Er sagte "Hallo".') == 'Er sagte „Hallo“.'

    def test_single_quotes(self, german):
        assert german.to_advanced_typography("Sie sagte 'ja' und ging.") == "Sie sagte ‚ja‘ und ging."

    def test_apostrophe(self, german):
        assert german.to_advanced_typography("Geht's dir gut") == "Geht’s dir gut"

    def test_ellipsis(self, german):
        assert german.to_advanced_typography("Und dann...") == "Und dann…"

    def test_abbreviation_gets_non_breaking_space(self, german):
        assert german.to_advanced_typography("z.B. heute") == "z.\u00a0B. heute"
