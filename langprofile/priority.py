"""
Rule Priorities for German
==========================
Priority values used by overlap resolution when several checkers report
findings on the same span. Higher values win; the default is 0.

The table is curated data, not a formula. Each value encodes a tuned
judgment call and other components depend on the relative order, so
entries must be kept exactly as they are.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

__version__ = "1.0.0"

DEFAULT_PRIORITY = 0

PRIORITY_OVERRIDES: Mapping[str, int] = MappingProxyType({
    # Rule ids
    'OLD_SPELLING_INTERNAL': 10,               # pre-1996 spelling beats every other finding
    'ROCK_N_ROLL': 1,                          # better message than DE_CASE
    'DE_PROHIBITED_COMPOUNDS': 1,              # more detailed message than the speller's
    'ANS_OHNE_APOSTROPH': 1,                   # specific phrase rule
    'DIESEN_JAHRES': 1,                        # specific phrase rule
    'EBEN_FALLS': 1,                           # specific phrase rule
    'UST_ID': 1,                               # specific abbreviation rule
    'VER_INF_PKT_VER_INF': 1,                  # wins over DE_CASE
    'DASS_MIT_VERB': 1,                        # wins over SUBJUNKTION_KOMMA ("Dass wird Konsequenzen haben.")
    'AB_TEST': 1,                              # wins over speller and agreement
    'BZGL_ABK': 1,                             # wins over speller
    'DURCH_WACHSEN': 1,                        # wins over SUBSTANTIVIERUNG_NACH_DURCH
    'RUNDUM_SORGLOS_PAKET': 1,                 # wins over DE_CASE
    'MIT_FREUNDLICHEN_GRUESSE': 1,             # wins over MEIN_KLEIN_HAUS
    # default is 0
    'DE_AGREEMENT': -1,                        # yields to RECHT_MACHEN, MONTAGS, KONJUNKTION_DASS_DAS, DESWEITEREN, DIES_BEZUEGLICH
    'MEIN_KLEIN_HAUS': -1,                     # yields to specific rules with a suggestion (DIES_BEZÜGLICH)
    'COMMA_IN_FRONT_RELATIVE_CLAUSE': -1,      # yields to KONJUNKTION_DASS_DAS
    'MODALVERB_FLEKT_VERB': -1,                # yields to more specific verb rules
    'AKZENT_STATT_APOSTROPH': -1,              # yields to PLURAL_APOSTROPH
    'GERMAN_WORD_REPEAT_RULE': -1,             # yields to more specific rules
    'GERMAN_SPELLER_RULE': -3,                 # most other rules are more specific than the speller
    'AUSTRIAN_GERMAN_SPELLER_RULE': -3,        # same as GERMAN_SPELLER_RULE
    'SWISS_GERMAN_SPELLER_RULE': -3,           # same as GERMAN_SPELLER_RULE
    'PUNCTUATION_PARAGRAPH_END': -4,           # must not hide spelling mistakes
    'PUNKT_ENDE_ABSATZ': -10,                  # high false alarm rate, never hides another finding
    'KOMMA_ZWISCHEN_HAUPT_UND_NEBENSATZ': -10, # high false alarm rate
    'KOMMA_VOR_RELATIVSATZ': -10,              # high false alarm rate
    'COMMA_BEHIND_RELATIVE_CLAUSE': -10,       # high false alarm rate
    'TOO_LONG_PARAGRAPH': -15,                 # style only
    # Category ids: style issues never hide overlapping real errors
    'COLLOQUIALISMS': -15,                     # style category
    'REDUNDANCY': -15,                         # style category
    'GENDER_NEUTRALITY': -15,                  # style category
    'TYPOGRAPHY': -15,                         # style category
})


# Families of ids minted at runtime (one per confusion pair), checked in order
PREFIX_PRIORITIES: Tuple[Tuple[str, int], ...] = (
    ('CONFUSION_RULE_', -1),
)


def priority_of(identifier: str) -> int:
    """
    Get the priority for a rule id or category id.

    Args:
        identifier: Exact rule id, category id, or a minted family id

    Returns:
        The override value, the family value, or DEFAULT_PRIORITY
    """
    priority = PRIORITY_OVERRIDES.get(identifier)
    if priority is not None:
        return priority
    for prefix, family_priority in PREFIX_PRIORITIES:
        if identifier.startswith(prefix):
            return family_priority
    return DEFAULT_PRIORITY


def rule_priority(rule_id: str, category_id: str) -> int:
    """
    Combine rule and category priority for one checker.

    A non-default priority for the rule itself takes precedence over the
    priority of its category.
    """
    priority = priority_of(rule_id)
    if priority != DEFAULT_PRIORITY:
        return priority
    return priority_of(category_id)
