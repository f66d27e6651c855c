"""
Spelling Rules
==============
Speller rules of the regional German variants. The plain German profile
has none; each variant adds the one matching its dictionary.
"""

from .base import Rule


class GermanSpellerRule(Rule):
    RULE_ID = "GERMAN_SPELLER_RULE"
    CATEGORY_ID = "TYPOS"
    DESCRIPTION = "Möglicher Tippfehler gefunden"


class AustrianGermanSpellerRule(GermanSpellerRule):
    RULE_ID = "AUSTRIAN_GERMAN_SPELLER_RULE"


class SwissGermanSpellerRule(GermanSpellerRule):
    RULE_ID = "SWISS_GERMAN_SPELLER_RULE"
