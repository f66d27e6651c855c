"""
Rule Catalog
============
Declarative checker lists for German, split into three tiers:

- base: needs nothing but the rule context
- language model: needs the n-gram language model handle
- embedding model: needs the word2vec model handle

Base and language-model lists are rebuilt on every call. The embedding
list is computed once per catalog and the same list object is returned
afterwards, because building it is expensive and the model cannot change
for the lifetime of a profile.

Declaration order is the output order. Any constructor failure aborts the
whole tier; a partial list is never returned.
"""

from typing import Any, Callable, Dict, List, Sequence, Tuple

from .base import CheckerDescriptor, RuleContext, Tier
from .cache import ComputeOnce
from .config import CatalogConfig
from .errors import CheckerConstructionError, ConfigurationError, ResourceUnavailableError, translate_errors
from .log import get_logger
from .rules import neuralnetwork
from .rules.base import Example, Rule
from .rules.common import (
    CommaWhitespaceRule, EmptyLineRule, GenericUnpairedBracketsRule, LongParagraphRule,
    MultipleWhitespaceRule, PunctuationMarkAtParagraphEnd, UppercaseSentenceStartRule,
    WhiteSpaceAtBeginOfParagraph, WhiteSpaceBeforeParagraphEnd,
)
from .rules.german import (
    AgreementRule, AgreementRule2, CaseRule, CompoundCoherencyRule, CompoundInfinitivRule,
    DashRule, DuUpperLowerCaseRule, GermanDoublePunctuationRule, GermanFillerWordsRule,
    GermanParagraphRepeatBeginningRule, GermanReadabilityRule, GermanStyleRepeatedWordRule,
    GermanWordRepeatBeginningRule, GermanWordRepeatRule, GermanWrongWordInContextRule,
    LongSentenceRule, MissingCommaRelativeClauseRule, MissingVerbRule, OldSpellingRule,
    SentenceWhitespaceRule, SimilarNameRule, SimpleReplaceRule, SubjectVerbAgreementRule,
    UnitConversionRule, VerbAgreementRule, WiederVsWiderRule, WordCoherencyRule,
)
from .rules.ngram import GermanConfusionProbabilityRule, ProhibitedCompoundRule, UpperCaseNgramRule

__version__ = "1.0.0"

logger = get_logger(__name__)

BRACKET_START_SYMBOLS = ("[", "(", "{", "„", "»", "«", "\"")
BRACKET_END_SYMBOLS = ("]", ")", "}", "“", "«", "»", "\"")

COMMA_WHITESPACE_EXAMPLES = (
    Example.wrong("Die Partei<marker> ,</marker> die die letzte Wahl gewann."),
    Example.fixed("Die Partei<marker>,</marker> die die letzte Wahl gewann."),
)

SENTENCE_START_EXAMPLES = (
    Example.wrong("Das Haus ist alt. <marker>es</marker> wurde 1950 gebaut."),
    Example.fixed("Das Haus ist alt. <marker>Es</marker> wurde 1950 gebaut."),
)


def _simple(rule_cls) -> CheckerDescriptor:
    """Descriptor for a rule that only needs the context."""
    return CheckerDescriptor(rule_cls.RULE_ID, rule_cls.CATEGORY_ID, rule_cls)


def german_base_descriptors(settings: CatalogConfig) -> Tuple[CheckerDescriptor, ...]:
    """
    Base tier of the German profile, in pipeline order.

    Args:
        settings: Default thresholds for the configurable rules
    """
    return (
        CheckerDescriptor(
            "COMMA_PARENTHESIS_WHITESPACE", "TYPOGRAPHY",
            lambda ctx: CommaWhitespaceRule(ctx, examples=COMMA_WHITESPACE_EXAMPLES)),
        CheckerDescriptor(
            "UNPAIRED_BRACKETS", "PUNCTUATION",
            lambda ctx: GenericUnpairedBracketsRule(ctx, BRACKET_START_SYMBOLS, BRACKET_END_SYMBOLS)),
        CheckerDescriptor(
            "UPPERCASE_SENTENCE_START", "CASING",
            lambda ctx: UppercaseSentenceStartRule(ctx, examples=SENTENCE_START_EXAMPLES)),
        _simple(MultipleWhitespaceRule),
        # specific to German:
        _simple(SimpleReplaceRule),
        _simple(OldSpellingRule),
        _simple(SentenceWhitespaceRule),
        _simple(GermanDoublePunctuationRule),
        _simple(MissingVerbRule),
        _simple(GermanWordRepeatRule),
        _simple(GermanWordRepeatBeginningRule),
        _simple(GermanWrongWordInContextRule),
        _simple(AgreementRule),
        _simple(AgreementRule2),
        _simple(CaseRule),
        _simple(DashRule),
        _simple(VerbAgreementRule),
        _simple(SubjectVerbAgreementRule),
        _simple(WordCoherencyRule),
        _simple(SimilarNameRule),
        _simple(WiederVsWiderRule),
        _simple(WhiteSpaceBeforeParagraphEnd),
        _simple(WhiteSpaceAtBeginOfParagraph),
        _simple(EmptyLineRule),
        CheckerDescriptor(
            "STYLE_REPEATED_WORD_RULE_DE", "STYLE",
            lambda ctx: GermanStyleRepeatedWordRule(ctx, settings.repeated_word_distance)),
        _simple(CompoundCoherencyRule),
        CheckerDescriptor(
            "TOO_LONG_SENTENCE_DE", "STYLE",
            lambda ctx: LongSentenceRule(ctx, settings.long_sentence_max_words)),
        CheckerDescriptor(
            "TOO_LONG_PARAGRAPH", "STYLE",
            lambda ctx: LongParagraphRule(ctx, settings.long_paragraph_max_words)),
        CheckerDescriptor(
            "FILLER_WORDS_DE", "STYLE",
            lambda ctx: GermanFillerWordsRule(ctx, settings.filler_words_percent)),
        _simple(GermanParagraphRepeatBeginningRule),
        _simple(PunctuationMarkAtParagraphEnd),
        _simple(DuUpperLowerCaseRule),
        _simple(UnitConversionRule),
        CheckerDescriptor(
            "COMMA_IN_FRONT_RELATIVE_CLAUSE", "PUNCTUATION",
            lambda ctx: MissingCommaRelativeClauseRule(ctx)),
        CheckerDescriptor(
            "COMMA_BEHIND_RELATIVE_CLAUSE", "PUNCTUATION",
            lambda ctx: MissingCommaRelativeClauseRule(ctx, behind=True)),
        CheckerDescriptor(
            "READABILITY_RULE_SIMPLE_DE", "STYLE",
            lambda ctx: GermanReadabilityRule(ctx, too_easy=True)),
        CheckerDescriptor(
            "READABILITY_RULE_DIFFICULT_DE", "STYLE",
            lambda ctx: GermanReadabilityRule(ctx, too_easy=False)),
        _simple(CompoundInfinitivRule),
    )


def _with_language_model(rule_cls) -> CheckerDescriptor:
    return CheckerDescriptor(rule_cls.RULE_ID, rule_cls.CATEGORY_ID, rule_cls,
                             tier=Tier.LANGUAGE_MODEL)


GERMAN_LANGUAGE_MODEL_DESCRIPTORS: Tuple[CheckerDescriptor, ...] = (
    _with_language_model(UpperCaseNgramRule),
    _with_language_model(GermanConfusionProbabilityRule),
    _with_language_model(ProhibitedCompoundRule),
)


def _check_unique(descriptors: Sequence[CheckerDescriptor], tier: Tier):
    seen = set()
    for descriptor in descriptors:
        if descriptor.tier is not tier:
            raise ConfigurationError(
                f"Checker {descriptor.rule_id} is declared for the {descriptor.tier.value} tier, "
                f"not {tier.value}",
                key=descriptor.rule_id
            )
        if descriptor.rule_id in seen:
            raise ConfigurationError(
                f"Duplicate checker id {descriptor.rule_id} in {tier.value} tier",
                key=descriptor.rule_id
            )
        seen.add(descriptor.rule_id)


def _require_handle(handle: Any, kind: str):
    if handle is None or not getattr(handle, 'is_usable', True):
        raise ResourceUnavailableError(f"A usable {kind} handle is required",
                                       resource=kind)


class RuleCatalog:
    """
    Builds the checker lists of one profile.

    Args:
        base: Base tier descriptors
        language_model: Language-model tier descriptors
        embedding_factory: Callable (context, word2vec_model) -> rules
    """

    def __init__(
        self,
        base: Sequence[CheckerDescriptor],
        language_model: Sequence[CheckerDescriptor] = GERMAN_LANGUAGE_MODEL_DESCRIPTORS,
        embedding_factory: Callable[..., List[Rule]] = neuralnetwork.create_rules
    ):
        _check_unique(base, Tier.BASE)
        _check_unique(language_model, Tier.LANGUAGE_MODEL)
        self.base = tuple(base)
        self.language_model = tuple(language_model)
        self._embedding_factory = embedding_factory
        self._embedding_rules: ComputeOnce[List[Rule]] = ComputeOnce("embedding_model_checkers")

    def descriptors(self, tier: Tier) -> Tuple[CheckerDescriptor, ...]:
        if tier is Tier.BASE:
            return self.base
        if tier is Tier.LANGUAGE_MODEL:
            return self.language_model
        raise ConfigurationError(f"{tier.value} tier is not declarative", key=tier.value)

    def _build(self, descriptors: Sequence[CheckerDescriptor], context: RuleContext,
               *resources) -> List[Rule]:
        context.validate()
        rules = []
        for descriptor in descriptors:
            rule = translate_errors(descriptor.rule_id)(descriptor.factory)(context, *resources)
            if rule.rule_id != descriptor.rule_id:
                raise CheckerConstructionError(
                    f"Descriptor {descriptor.rule_id} built a rule with id {rule.rule_id}",
                    rule_id=descriptor.rule_id
                )
            rules.append(rule)
        return rules

    def build_base_checkers(self, context: RuleContext) -> List[Rule]:
        """Build the base tier, in declaration order."""
        rules = self._build(self.base, context)
        logger.debug("Built base checkers", tier=Tier.BASE.value, count=len(rules))
        return rules

    def build_language_model_checkers(self, context: RuleContext, language_model: Any) -> List[Rule]:
        """
        Build the language-model tier.

        Raises:
            ResourceUnavailableError: language_model is None or closed
        """
        _require_handle(language_model, 'language_model')
        rules = self._build(self.language_model, context, language_model)
        logger.debug("Built language model checkers", tier=Tier.LANGUAGE_MODEL.value,
                     count=len(rules))
        return rules

    def build_embedding_model_checkers(self, context: RuleContext, word2vec_model: Any) -> List[Rule]:
        """
        Build the embedding tier once; later calls return the same list.

        Raises:
            ResourceUnavailableError: first call without a usable model
        """
        def compute() -> List[Rule]:
            _require_handle(word2vec_model, 'word2vec_model')
            context.validate()
            rules = translate_errors('NEURALNETWORK')(self._embedding_factory)(context, word2vec_model)
            seen = set()
            for rule in rules:
                if rule.rule_id in seen:
                    raise ConfigurationError(
                        f"Duplicate checker id {rule.rule_id} in {Tier.EMBEDDING_MODEL.value} tier",
                        key=rule.rule_id
                    )
                seen.add(rule.rule_id)
            return rules

        return self._embedding_rules.get_or_compute(compute)

    def get_status(self) -> Dict[str, Any]:
        return {
            'base': len(self.base),
            'language_model': len(self.language_model),
            'embedding_model_built': self._embedding_rules.is_computed,
        }
