"""
Rule Base Classes
=================
Common interface of every checker in the catalog.

A rule carries its stable id, its category id, a localized description and
the parameters it was constructed with. Detection itself is delegated to
the profile's grammar backend with only the rule's own id enabled.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..base import RuleContext, Tier

__version__ = "1.0.0"


@dataclass
class RuleMatch:
    """A finding reported for one rule."""
    rule_id: str
    category_id: str
    message: str
    paragraph_index: int
    offset: int
    length: int
    context: str = ""
    replacements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for API responses."""
        return {
            'rule_id': self.rule_id,
            'category_id': self.category_id,
            'message': self.message,
            'paragraph_index': self.paragraph_index,
            'offset': self.offset,
            'length': self.length,
            'context': self.context,
            'replacements': list(self.replacements),
        }


@dataclass
class RuleCheckResult:
    """Result of running one rule over a document."""
    rule_id: str
    matches: List[RuleMatch] = field(default_factory=list)
    processing_time_ms: float = 0.0
    success: bool = True
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rule_id': self.rule_id,
            'matches': [m.to_dict() for m in self.matches],
            'processing_time_ms': self.processing_time_ms,
            'success': self.success,
            'error': self.error,
        }


@dataclass
class Example:
    """An example sentence; the error is wrapped in <marker></marker>."""
    text: str
    correct: bool

    @classmethod
    def wrong(cls, text: str) -> 'Example':
        return cls(text, False)

    @classmethod
    def fixed(cls, text: str) -> 'Example':
        return cls(text, True)


class Rule:
    """
    Base class for all checkers.

    Subclasses set RULE_ID, CATEGORY_ID and DESCRIPTION; the description is
    replaced by context.messages[MESSAGE_KEY] when present.
    """

    RULE_ID: str = "RULE"
    CATEGORY_ID: str = "MISC"
    DESCRIPTION: str = ""
    MESSAGE_KEY: Optional[str] = None
    TIER: Tier = Tier.BASE

    def __init__(self, context: RuleContext, examples: Sequence[Example] = (),
                 enabled: bool = True):
        self.context = context
        self.enabled = enabled
        self.examples: Tuple[Example, ...] = tuple(examples)
        self.description = context.message(self.MESSAGE_KEY or self.RULE_ID.lower(),
                                           self.DESCRIPTION)
        self._backend = None
        self._initialized = False

    @property
    def rule_id(self) -> str:
        return self.RULE_ID

    @property
    def category_id(self) -> str:
        return self.CATEGORY_ID

    @property
    def incorrect_examples(self) -> List[str]:
        return [e.text for e in self.examples if not e.correct]

    @property
    def correct_examples(self) -> List[str]:
        return [e.text for e in self.examples if e.correct]

    def owns_match(self, match_rule_id: str) -> bool:
        """Whether a backend finding with this id belongs to this rule."""
        return match_rule_id == self.rule_id

    def _initialize(self) -> bool:
        """Fetch the shared grammar backend from the profile (lazy)."""
        self._backend = self.context.language.get_grammar_backend()
        return True

    def _check_impl(self, paragraphs: List[Tuple[int, str]]) -> List[RuleMatch]:
        matches = []
        for para_idx, text in paragraphs:
            if not text.strip():
                continue
            for found in self._backend.check(text, [self.rule_id]):
                if not self.owns_match(found.rule_id):
                    continue
                matches.append(RuleMatch(
                    rule_id=found.rule_id,
                    category_id=self.category_id,
                    message=found.message,
                    paragraph_index=para_idx,
                    offset=found.offset,
                    length=found.length,
                    context=found.sentence or found.context,
                    replacements=found.replacements,
                ))
        return matches

    def check(self, paragraphs: List[Tuple[int, str]]) -> RuleCheckResult:
        """
        Run the rule on paragraphs.

        Handles initialization, timing, and error handling. Failures are
        reported on the result, not raised.

        Args:
            paragraphs: List of (index, text) tuples
        """
        start_time = time.time()
        result = RuleCheckResult(rule_id=self.rule_id)

        if not self.enabled:
            return result

        if not self._initialized:
            try:
                self._initialized = self._initialize()
            except Exception as e:
                result.success = False
                result.error = f"Initialization failed: {e}"
                return result

        try:
            result.matches = self._check_impl(paragraphs)
        except Exception as e:
            result.success = False
            result.error = f"Check failed: {e}"

        result.processing_time_ms = (time.time() - start_time) * 1000
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_id!r})"
