"""
Language Profiles
=================
German and its regional variants.

A profile ties together:
- the rule catalog (base, language-model and embedding tiers)
- the priority table used by overlap resolution
- the shared resources it owns (language model, word2vec model, compound
  tokenizers, grammar backend, spaCy pipelines), each behind its own
  ResourceCache and released by close()

Profiles are meant to be long-lived and shared between threads.
"""

import functools
import re
import threading
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from . import priority
from .base import CheckerDescriptor, RuleContext, UserConfig
from .cache import ResourceCache
from .catalog import RuleCatalog, german_base_descriptors
from .config import ProfileConfig, get_config
from .errors import ResourceUnavailableError
from .log import get_logger
from .resources import ResourceLoaders
from .rules.base import Rule
from .rules.spelling import AustrianGermanSpellerRule, GermanSpellerRule, SwissGermanSpellerRule

__version__ = "1.0.0"

logger = get_logger(__name__)


class LanguageProfile:
    """
    Base class of all language profiles.

    Args:
        config: Configuration; the global configuration when omitted
        loaders: Resource constructors; the real implementations when omitted
    """

    NAME: str = ""
    SHORT_CODE: str = ""
    VARIANT_CODE: Optional[str] = None
    COUNTRIES: tuple = ()
    MAINTAINERS: tuple = ()
    MAINTAINED_STATE: str = "LookingForNewMaintainer"

    OPENING_DOUBLE_QUOTE = "“"
    CLOSING_DOUBLE_QUOTE = "”"
    OPENING_SINGLE_QUOTE = "‘"
    CLOSING_SINGLE_QUOTE = "’"
    ADVANCED_TYPOGRAPHY = False

    def __init__(self, config: Optional[ProfileConfig] = None,
                 loaders: Optional[ResourceLoaders] = None):
        self.config = config or get_config()
        self.loaders = loaders or ResourceLoaders()
        self._language_model = ResourceCache('language_model', self._load_language_model)
        self._word2vec_model = ResourceCache('word2vec_model', self._load_word2vec_model)
        self._grammar_backend = ResourceCache('grammar_backend', self.loaders.grammar_backend)
        self._tagger = ResourceCache('tagger', self.loaders.spacy_pipeline)
        self._sentence_tokenizer = ResourceCache('sentence_tokenizer', self.loaders.spacy_pipeline)
        self._closed = False

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def short_code(self) -> str:
        return self.SHORT_CODE

    @property
    def language_code(self) -> str:
        """Code with country, e.g. 'de-AT'; the short code for plain profiles."""
        return self.VARIANT_CODE or self.SHORT_CODE

    @property
    def countries(self) -> List[str]:
        return list(self.COUNTRIES)

    @property
    def maintainers(self) -> List[str]:
        return list(self.MAINTAINERS)

    @property
    def maintained_state(self) -> str:
        return self.MAINTAINED_STATE

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.language_code!r})"

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    @property
    def catalog(self) -> RuleCatalog:
        raise NotImplementedError

    def create_context(
        self,
        messages: Optional[Mapping] = None,
        user_config: Optional[UserConfig] = None,
        mother_tongue: Optional['LanguageProfile'] = None,
        alt_languages: Optional[List['LanguageProfile']] = None
    ) -> RuleContext:
        """Build a RuleContext bound to this profile."""
        return RuleContext(
            messages={} if messages is None else messages,
            language=self,
            user_config=user_config,
            mother_tongue=mother_tongue,
            alt_languages=list(alt_languages or []),
        )

    def build_base_checkers(self, context: RuleContext) -> List[Rule]:
        return self.catalog.build_base_checkers(context)

    def build_language_model_checkers(self, context: RuleContext, language_model: Any) -> List[Rule]:
        return self.catalog.build_language_model_checkers(context, language_model)

    def build_embedding_model_checkers(self, context: RuleContext, word2vec_model: Any) -> List[Rule]:
        return self.catalog.build_embedding_model_checkers(context, word2vec_model)

    def priority_of(self, identifier: str) -> int:
        """Priority of a rule or category id. Default 0."""
        return priority.DEFAULT_PRIORITY

    def rule_priority(self, rule: Rule) -> int:
        """Priority of a rule, falling back to its category's priority."""
        rule_prio = self.priority_of(rule.rule_id)
        if rule_prio != priority.DEFAULT_PRIORITY:
            return rule_prio
        return self.priority_of(rule.category_id)

    # ------------------------------------------------------------------
    # Shared resources
    # ------------------------------------------------------------------

    def _model_path(self, index_dir, configured: Optional[str], kind: str) -> Path:
        location = index_dir or configured
        if not location:
            raise ResourceUnavailableError(f"No directory configured for the {kind}",
                                           resource=kind)
        return Path(location) / self.short_code

    def _load_language_model(self, index_dir=None):
        return self.loaders.language_model(
            self._model_path(index_dir, self.config.resources.ngram_dir, 'language_model'))

    def _load_word2vec_model(self, index_dir=None):
        return self.loaders.word2vec_model(
            self._model_path(index_dir, self.config.resources.word2vec_dir, 'word2vec_model'))

    def get_language_model(self, index_dir=None):
        """
        Get the n-gram language model, loading it on first use.

        Args:
            index_dir: Parent directory of the per-language model; defaults
                to resources.ngram_dir. Ignored once the model is loaded.
        """
        return self._language_model.get(index_dir)

    def get_word2vec_model(self, index_dir=None):
        """Get the word2vec model in <index_dir>/<short code>, loading it on first use."""
        return self._word2vec_model.get(index_dir)

    def get_grammar_backend(self):
        """Get the LanguageTool backend used by all rules of this profile."""
        return self._grammar_backend.get(
            self.language_code,
            self.config.languagetool,
            self.config.resources.ngram_dir
        )

    def get_tagger(self):
        """Get the spaCy tagging pipeline."""
        return self._tagger.get(self.config.resources.spacy_models)

    def get_sentence_tokenizer(self):
        """Get the rule-based spaCy sentence tokenizer."""
        return self._sentence_tokenizer.get(None)

    def _caches(self) -> List[ResourceCache]:
        return [
            self._language_model, self._word2vec_model, self._grammar_backend,
            self._tagger, self._sentence_tokenizer,
        ]

    def close(self):
        """
        Release every resource owned by this profile. Idempotent.

        Every cache is released even when an earlier one fails to close;
        the first failure is re-raised once all of them have been visited.
        """
        first_error = None
        try:
            with logger.log_operation("profile teardown", language=self.language_code):
                for cache in self._caches():
                    try:
                        cache.release()
                    except Exception as e:
                        logger.error("Resource release failed", kind=cache.kind, error=str(e))
                        if first_error is None:
                            first_error = e
                if first_error is not None:
                    raise first_error
        finally:
            self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # ------------------------------------------------------------------
    # Typography
    # ------------------------------------------------------------------

    @property
    def is_advanced_typography_enabled(self) -> bool:
        return self.ADVANCED_TYPOGRAPHY

    def to_advanced_typography(self, text: str) -> str:
        """Replace ASCII ellipsis, quotes and apostrophes with typographic ones."""
        output = re.sub(r'(?<!\.)\.\.\.(?!\.)', '…', text)
        output = re.sub(r'"(\w)', self.OPENING_DOUBLE_QUOTE + r'\1', output)
        output = re.sub(r'(\w[.!?]?)"', r'\1' + self.CLOSING_DOUBLE_QUOTE, output)
        output = re.sub(r"(^|\s)'(\w)", r'\1' + self.OPENING_SINGLE_QUOTE + r'\2', output)
        output = re.sub(r"(\w[.!?]?)'(?=\s|$|[,;:])", r'\1' + self.CLOSING_SINGLE_QUOTE, output)
        output = output.replace("'", "’")
        return output

    def get_status(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'language_code': self.language_code,
            'closed': self._closed,
            'catalog': self.catalog.get_status(),
            'resources': {cache.kind: cache.get_status() for cache in self._caches()},
        }


class German(LanguageProfile):
    """
    Support for German. Use the sub classes GermanyGerman, SwissGerman or
    AustrianGerman if you need spell checking.
    """

    NAME = "German"
    SHORT_CODE = "de"
    COUNTRIES = ("LU", "LI", "BE")
    MAINTAINERS = ("Jan Schreiber", "Daniel Naber")
    MAINTAINED_STATE = "ActivelyMaintained"

    OPENING_DOUBLE_QUOTE = "„"
    CLOSING_DOUBLE_QUOTE = "“"
    OPENING_SINGLE_QUOTE = "‚"
    CLOSING_SINGLE_QUOTE = "‘"
    ADVANCED_TYPOGRAPHY = True

    SPELLER_RULE = None

    def __init__(self, config: Optional[ProfileConfig] = None,
                 loaders: Optional[ResourceLoaders] = None):
        super().__init__(config, loaders)
        descriptors = german_base_descriptors(self.config.catalog)
        if self.SPELLER_RULE is not None:
            speller = self.SPELLER_RULE
            descriptors = (CheckerDescriptor(speller.RULE_ID, speller.CATEGORY_ID, speller),) + descriptors
        self._catalog = RuleCatalog(descriptors)
        self._strict_compounds = ResourceCache(
            'strict_compound_tokenizer', functools.partial(self._load_compound_tokenizer, True))
        self._non_strict_compounds = ResourceCache(
            'non_strict_compound_tokenizer', functools.partial(self._load_compound_tokenizer, False))
        self._default_variant: Optional[LanguageProfile] = None
        self._variant_lock = threading.Lock()

    @property
    def catalog(self) -> RuleCatalog:
        return self._catalog

    @property
    def default_variant(self) -> Optional[LanguageProfile]:
        """The variant used when plain German is requested: Germany."""
        if self._default_variant is None:
            with self._variant_lock:
                if self._default_variant is None:
                    self._default_variant = GermanyGerman(self.config, self.loaders)
        return self._default_variant

    def priority_of(self, identifier: str) -> int:
        return priority.priority_of(identifier)

    def _load_compound_tokenizer(self, strict: bool):
        resources = self.config.resources
        if not resources.compound_dictionary:
            raise ResourceUnavailableError(
                "Could not set up German compound splitter: no dictionary configured",
                resource='compound_tokenizer'
            )
        return self.loaders.compound_tokenizer(
            strict, resources.compound_dictionary, resources.compound_max_edit_distance)

    def get_strict_compound_tokenizer(self):
        """Compound tokenizer that only splits into known words."""
        return self._strict_compounds.get()

    def get_non_strict_compound_splitter(self):
        """Compound tokenizer that tolerates misspelled parts."""
        return self._non_strict_compounds.get()

    def _caches(self) -> List[ResourceCache]:
        return super()._caches() + [self._strict_compounds, self._non_strict_compounds]

    def close(self):
        try:
            super().close()
        finally:
            with self._variant_lock:
                variant = self._default_variant
            if variant is not None:
                variant.close()

    def to_advanced_typography(self, text: str) -> str:
        output = super().to_advanced_typography(text)
        # non-breaking space inside abbreviations such as "z.B."
        return re.sub(r'\b([a-zA-Z]\.)([a-zA-Z]\.)', '\\1\u00a0\\2', output)


class _GermanVariant(German):

    @property
    def default_variant(self) -> Optional[LanguageProfile]:
        return None


class GermanyGerman(_GermanVariant):
    NAME = "German (Germany)"
    VARIANT_CODE = "de-DE"
    COUNTRIES = ("DE",)
    SPELLER_RULE = GermanSpellerRule


class AustrianGerman(_GermanVariant):
    NAME = "German (Austria)"
    VARIANT_CODE = "de-AT"
    COUNTRIES = ("AT",)
    SPELLER_RULE = AustrianGermanSpellerRule


class SwissGerman(_GermanVariant):
    NAME = "German (Swiss)"
    VARIANT_CODE = "de-CH"
    COUNTRIES = ("CH",)
    SPELLER_RULE = SwissGermanSpellerRule
