"""
Language Profile Base Classes
=============================
Shared data model for catalog assembly and resource handling.

- Tier: which shared resource a checker needs before it can be built
- UserConfig: per-user overrides for configurable rules
- RuleContext: runtime configuration handed to every checker factory
- CheckerDescriptor: stable id + category + factory for one checker
- ResourceHandle: common interface of all heavy shared resources
"""

import enum
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

from .errors import ConfigurationError

if TYPE_CHECKING:
    from .profile import LanguageProfile
    from .rules.base import Rule

__version__ = "1.0.0"


class Tier(enum.Enum):
    """Resource requirement of a checker."""
    BASE = "base"
    LANGUAGE_MODEL = "language_model"
    EMBEDDING_MODEL = "embedding_model"


@dataclass
class UserConfig:
    """
    User preferences consulted by configurable rules.

    rule_values maps a rule id to the user's threshold for that rule
    (e.g. {'TOO_LONG_SENTENCE_DE': 40}).
    """
    rule_values: Dict[str, int] = field(default_factory=dict)
    accepted_words: List[str] = field(default_factory=list)

    def get_rule_value(self, rule_id: str, default: int) -> int:
        """Return the user's integer value for a rule, or the default."""
        value = self.rule_values.get(rule_id, default)
        # bool is an int subclass but never a valid threshold
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"User value for {rule_id} must be an integer, got {value!r}",
                key=rule_id
            )
        return value


@dataclass
class RuleContext:
    """
    Runtime configuration passed to every checker factory.

    Attributes:
        messages: Localized message lookup (message key -> text)
        language: The profile the checkers are built for
        user_config: User preferences, or None for defaults
        mother_tongue: Profile of the writer's native language, if known
        alt_languages: Other languages the text may contain
    """
    messages: Mapping
    language: 'LanguageProfile'
    user_config: Optional[UserConfig] = None
    mother_tongue: Optional['LanguageProfile'] = None
    alt_languages: List['LanguageProfile'] = field(default_factory=list)

    def validate(self):
        """Raise ConfigurationError if the context cannot be used for assembly."""
        if not isinstance(self.messages, Mapping):
            raise ConfigurationError(
                f"messages must be a mapping, got {type(self.messages).__name__}",
                key='messages'
            )
        if self.language is None:
            raise ConfigurationError("A language profile is required", key='language')
        if self.user_config is not None and not isinstance(self.user_config, UserConfig):
            raise ConfigurationError(
                f"user_config must be a UserConfig, got {type(self.user_config).__name__}",
                key='user_config'
            )

    @property
    def effective_user_config(self) -> UserConfig:
        return self.user_config or UserConfig()

    def message(self, key: str, default: str) -> str:
        """Look up a localized message, falling back to the given default."""
        return self.messages.get(key, default)


@dataclass(frozen=True)
class CheckerDescriptor:
    """
    Identifies one checker of a catalog tier.

    Identifiers are unique within a profile; category ids are shared by
    related checkers.
    """
    rule_id: str
    category_id: str
    factory: Callable[..., 'Rule']
    tier: Tier = Tier.BASE


class ResourceHandle(ABC):
    """
    Abstract base class for heavy shared resources.

    A handle is built once per profile by a ResourceCache, shared read-only
    by every reader, and closed exactly once on teardown.
    """

    RESOURCE_NAME: str = "Resource"

    def __init__(self):
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def is_usable(self) -> bool:
        """True while the handle can be handed to checkers."""
        return not self._closed

    def close(self):
        """Release the underlying resources. Safe to call more than once."""
        self._closed = True

    @abstractmethod
    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the resource."""
        pass
