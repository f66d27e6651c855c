"""
German Rules
============
Checkers specific to German. Grammar-heavy rules (agreement, case,
relative clauses) rely on the backend's tagger and disambiguator; the
classes here only carry identity and configuration.
"""

from ..base import RuleContext
from .base import Rule
from .common import ConfigurableRule


class SimpleReplaceRule(Rule):
    RULE_ID = "DE_SIMPLE_REPLACE"
    CATEGORY_ID = "TYPOS"
    DESCRIPTION = "Prüft auf bestimmte falsche Wörter/Phrasen"


class OldSpellingRule(Rule):
    RULE_ID = "OLD_SPELLING_INTERNAL"
    CATEGORY_ID = "TYPOS"
    DESCRIPTION = "Alte Rechtschreibung (vor 1996)"


class SentenceWhitespaceRule(Rule):
    RULE_ID = "DE_SENTENCE_WHITESPACE"
    CATEGORY_ID = "TYPOGRAPHY"
    DESCRIPTION = "Fehlendes Leerzeichen zwischen Sätzen"


class GermanDoublePunctuationRule(Rule):
    RULE_ID = "DE_DOUBLE_PUNCTUATION"
    CATEGORY_ID = "PUNCTUATION"
    DESCRIPTION = "Doppelte Satzzeichen"


class MissingVerbRule(Rule):
    RULE_ID = "MISSING_VERB"
    CATEGORY_ID = "GRAMMAR"
    DESCRIPTION = "Satz ohne Verb"


class GermanWordRepeatRule(Rule):
    RULE_ID = "GERMAN_WORD_REPEAT_RULE"
    CATEGORY_ID = "MISC"
    DESCRIPTION = "Wortwiederholung"


class GermanWordRepeatBeginningRule(Rule):
    RULE_ID = "GERMAN_WORD_REPEAT_BEGINNING_RULE"
    CATEGORY_ID = "STYLE"
    DESCRIPTION = "Aufeinanderfolgende Sätze beginnen mit dem gleichen Wort"


class GermanWrongWordInContextRule(Rule):
    RULE_ID = "GERMAN_WRONG_WORD_IN_CONTEXT"
    CATEGORY_ID = "CONFUSED_WORDS"
    DESCRIPTION = "Wortverwechslung im Kontext"


class AgreementRule(Rule):
    RULE_ID = "DE_AGREEMENT"
    CATEGORY_ID = "GRAMMAR"
    DESCRIPTION = "Kongruenz von Nominalphrasen (unvollständig!)"


class AgreementRule2(Rule):
    RULE_ID = "DE_AGREEMENT2"
    CATEGORY_ID = "GRAMMAR"
    DESCRIPTION = "Kongruenz von Adjektiv und Nomen (unvollständig!)"


class CaseRule(Rule):
    RULE_ID = "DE_CASE"
    CATEGORY_ID = "CASING"
    DESCRIPTION = "Großschreibung von Nomen und substantivierten Verben"


class DashRule(Rule):
    RULE_ID = "DE_DASH"
    CATEGORY_ID = "COMPOUNDING"
    DESCRIPTION = "Keine Leerzeichen in Bindestrich-Komposita"


class VerbAgreementRule(Rule):
    RULE_ID = "DE_VERBAGREEMENT"
    CATEGORY_ID = "GRAMMAR"
    DESCRIPTION = "Kongruenz von Subjekt und Prädikat (nur 1. u. 2. Person oder mit Personalpronomen)"


class SubjectVerbAgreementRule(Rule):
    RULE_ID = "DE_SUBJECT_VERB_AGREEMENT"
    CATEGORY_ID = "GRAMMAR"
    DESCRIPTION = "Kongruenz von Subjekt und Prädikat"


class WordCoherencyRule(Rule):
    RULE_ID = "DE_WORD_COHERENCY"
    CATEGORY_ID = "MISC"
    DESCRIPTION = "Einheitliche Schreibweise für Wörter mit mehr als einer korrekten Schreibweise"


class SimilarNameRule(Rule):
    RULE_ID = "DE_SIMILAR_NAMES"
    CATEGORY_ID = "MISC"
    DESCRIPTION = "Mögliche Tippfehler in Namen"


class WiederVsWiderRule(Rule):
    RULE_ID = "DE_WIEDER_VS_WIDER"
    CATEGORY_ID = "CONFUSED_WORDS"
    DESCRIPTION = "Möglicher Tippfehler 'wieder' vs. 'wider'"


class GermanStyleRepeatedWordRule(ConfigurableRule):
    """Repeated words within a distance of `value` sentences."""

    RULE_ID = "STYLE_REPEATED_WORD_RULE_DE"
    CATEGORY_ID = "STYLE"
    DESCRIPTION = "Wiederholte Wörter in aufeinanderfolgenden Sätzen"
    DEFAULT_VALUE = 1


class CompoundCoherencyRule(Rule):
    RULE_ID = "DE_COMPOUND_COHERENCY"
    CATEGORY_ID = "MISC"
    DESCRIPTION = "Einheitliche Schreibung bei Komposita (mit oder ohne Bindestrich)"


class LongSentenceRule(ConfigurableRule):
    """Sentences with more than `value` words."""

    RULE_ID = "TOO_LONG_SENTENCE_DE"
    CATEGORY_ID = "STYLE"
    DESCRIPTION = "Sehr langer Satz"
    DEFAULT_VALUE = 35


class GermanFillerWordsRule(ConfigurableRule):
    """Filler words above `value` percent of all words in a paragraph."""

    RULE_ID = "FILLER_WORDS_DE"
    CATEGORY_ID = "STYLE"
    DESCRIPTION = "Füllwörter"
    DEFAULT_VALUE = 8


class GermanParagraphRepeatBeginningRule(Rule):
    RULE_ID = "PARAGRAPH_REPEAT_BEGINNING_RULE"
    CATEGORY_ID = "STYLE"
    DESCRIPTION = "Aufeinanderfolgende Absätze beginnen mit dem gleichen Wort"


class DuUpperLowerCaseRule(Rule):
    RULE_ID = "DE_DU_UPPER_LOWER"
    CATEGORY_ID = "CASING"
    DESCRIPTION = "Einheitliche Groß- oder Kleinschreibung von 'du' und 'ihr'"


class UnitConversionRule(Rule):
    RULE_ID = "EINHEITEN_METRISCH"
    CATEGORY_ID = "SEMANTICS"
    DESCRIPTION = "Vorschläge für die Umrechnung in metrische Einheiten"


class MissingCommaRelativeClauseRule(Rule):
    """Missing comma before (or, with behind=True, after) a relative clause."""

    RULE_ID = "COMMA_IN_FRONT_RELATIVE_CLAUSE"
    BEHIND_RULE_ID = "COMMA_BEHIND_RELATIVE_CLAUSE"
    CATEGORY_ID = "PUNCTUATION"
    DESCRIPTION = "Fehlendes Komma vor Relativsatz"
    BEHIND_DESCRIPTION = "Fehlendes Komma nach Relativsatz"

    def __init__(self, context: RuleContext, behind: bool = False, **kwargs):
        self.behind = behind
        super().__init__(context, **kwargs)
        if behind:
            self.description = context.message(self.BEHIND_RULE_ID.lower(),
                                               self.BEHIND_DESCRIPTION)

    @property
    def rule_id(self) -> str:
        return self.BEHIND_RULE_ID if self.behind else self.RULE_ID


class GermanReadabilityRule(Rule):
    """Flags text that is too easy (too_easy=True) or too difficult to read."""

    RULE_ID = "READABILITY_RULE_SIMPLE_DE"
    DIFFICULT_RULE_ID = "READABILITY_RULE_DIFFICULT_DE"
    CATEGORY_ID = "STYLE"
    DESCRIPTION = "Lesbarkeit: Zu einfacher Text"
    DIFFICULT_DESCRIPTION = "Lesbarkeit: Zu schwieriger Text"

    def __init__(self, context: RuleContext, too_easy: bool, **kwargs):
        self.too_easy = too_easy
        super().__init__(context, **kwargs)
        if not too_easy:
            self.description = context.message(self.DIFFICULT_RULE_ID.lower(),
                                               self.DIFFICULT_DESCRIPTION)

    @property
    def rule_id(self) -> str:
        return self.RULE_ID if self.too_easy else self.DIFFICULT_RULE_ID


class CompoundInfinitivRule(Rule):
    RULE_ID = "COMPOUND_INFINITIV_RULE"
    CATEGORY_ID = "COMPOUNDING"
    DESCRIPTION = "Erweiterter Infinitiv mit zu (Zusammenschreibung)"
