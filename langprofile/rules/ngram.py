"""
Language-Model Rules
====================
Rules that need the n-gram language model. All of them are built with
the same handle instance and keep a reference to it.
"""

import re
from typing import Any, Optional

from ..base import RuleContext, Tier
from ..errors import ResourceUnavailableError
from .base import Rule


class LanguageModelRule(Rule):
    """Base class for rules backed by the n-gram language model."""

    TIER = Tier.LANGUAGE_MODEL

    def __init__(self, context: RuleContext, language_model: Any, **kwargs):
        if language_model is None or not getattr(language_model, 'is_usable', True):
            raise ResourceUnavailableError(
                f"{self.RULE_ID} needs a usable language model",
                resource="language_model"
            )
        super().__init__(context, **kwargs)
        self.language_model = language_model


class UpperCaseNgramRule(LanguageModelRule):
    RULE_ID = "DE_UPPER_CASE_NGRAM"
    CATEGORY_ID = "CASING"
    DESCRIPTION = "Großschreibung anhand von Wortstatistiken"


class GermanConfusionProbabilityRule(LanguageModelRule):
    """
    Statistical confusion of similar words ("seid"/"seit").

    Findings carry one id per confusion pair, minted as
    CONFUSION_RULE_<WORD1>_<WORD2>.
    """

    RULE_ID = "CONFUSION_RULE"
    CATEGORY_ID = "TYPOS"
    DESCRIPTION = "Statistische Prüfung auf Wortverwechslungen"
    PAIR_PREFIX = RULE_ID + "_"

    def owns_match(self, match_rule_id: str) -> bool:
        return match_rule_id == self.rule_id or match_rule_id.startswith(self.PAIR_PREFIX)

    @classmethod
    def confusion_pair_id(cls, word1: str, word2: str) -> str:
        """Id of the finding family for one confusion pair."""
        parts = [re.sub(r'\W', '_', w).upper() for w in (word1, word2)]
        return cls.PAIR_PREFIX + '_'.join(parts)


class ProhibitedCompoundRule(LanguageModelRule):
    """Compounds that are much rarer than a similar, correct compound."""

    RULE_ID = "DE_PROHIBITED_COMPOUNDS"
    CATEGORY_ID = "TYPOS"
    DESCRIPTION = "Markiert wahrscheinlich falsche Komposita"

    def __init__(self, context: RuleContext, language_model: Any, **kwargs):
        super().__init__(context, language_model, **kwargs)
        self.accepted_words = frozenset(context.effective_user_config.accepted_words)

    def is_accepted(self, word: Optional[str]) -> bool:
        return word in self.accepted_words
