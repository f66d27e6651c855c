"""
LanguageTool Grammar Backend
============================
Wraps language_tool_python as the detection engine behind every rule of
the catalog.

Features:
- One backend per profile (owned by the profile's ResourceCache)
- Per-call rule selection: only the requesting rule's id is enabled
- Optional remote server, otherwise a local Java server
- Optional n-gram language model directory for the language-model tier

Requires: pip install language-tool-python
"""

import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..base import ResourceHandle
from ..config import LanguageToolConfig
from ..errors import ResourceUnavailableError


@dataclass
class GrammarMatch:
    """Represents one finding reported by LanguageTool."""
    message: str
    context: str
    offset: int
    length: int
    replacements: List[str]
    rule_id: str
    category: str
    sentence: str = ""


class LanguageToolBackend(ResourceHandle):
    """
    LanguageTool server connection for one language code.

    Checks are serialized because the selected rule set lives on the
    shared tool object.
    """

    RESOURCE_NAME = "LanguageTool"

    MAX_REPLACEMENTS = 5

    def __init__(
        self,
        language: str,
        config: Optional[LanguageToolConfig] = None,
        language_model_dir: Optional[str] = None
    ):
        """
        Start (or connect to) LanguageTool.

        Args:
            language: Language code, e.g. 'de-DE'
            config: Backend configuration
            language_model_dir: Directory holding the n-gram data, if any

        Raises:
            ResourceUnavailableError: library missing or server not startable
        """
        super().__init__()
        self.language = language
        self.config = config or LanguageToolConfig()
        self.language_model_dir = language_model_dir
        self._lock = threading.Lock()
        self._tool = self._init_tool()

    def _init_tool(self):
        if not self.config.enabled:
            raise ResourceUnavailableError(
                "LanguageTool backend is disabled by configuration",
                resource=self.RESOURCE_NAME
            )
        try:
            import language_tool_python
        except ImportError as e:
            raise ResourceUnavailableError(
                f"language-tool-python not installed: {e}",
                resource=self.RESOURCE_NAME
            ) from e

        server_config = {
            'cacheSize': self.config.cache_size,
            'pipelineCaching': self.config.pipeline_caching,
        }
        if self.language_model_dir:
            server_config['languageModel'] = self.language_model_dir

        try:
            if self.config.remote_server:
                return language_tool_python.LanguageTool(
                    self.language, remote_server=self.config.remote_server
                )
            return language_tool_python.LanguageTool(self.language, config=server_config)
        except Exception as e:
            raise ResourceUnavailableError(
                f"LanguageTool initialization failed: {e}",
                resource=self.RESOURCE_NAME,
                location=self.config.remote_server
            ) from e

    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the backend."""
        return {
            'resource': self.RESOURCE_NAME,
            'language': self.language,
            'remote_server': self.config.remote_server,
            'language_model_dir': self.language_model_dir,
            'closed': self.is_closed,
        }

    def check(self, text: str, rule_ids: Iterable[str]) -> List[GrammarMatch]:
        """
        Check text with only the given rules enabled.

        Args:
            text: Text to check
            rule_ids: Rule ids to enable for this call

        Returns:
            List of GrammarMatch objects, in server order
        """
        if self.is_closed:
            raise ResourceUnavailableError("LanguageTool backend has been closed",
                                           resource=self.RESOURCE_NAME)
        wanted = set(rule_ids)

        with self._lock:
            self._tool.enabled_rules = wanted
            self._tool.enabled_rules_only = True
            matches = self._tool.check(text)

        issues = []
        for match in matches:
            replacements = list(match.replacements) if match.replacements else []
            issues.append(GrammarMatch(
                message=match.message,
                context=match.context,
                offset=match.offset,
                length=match.errorLength,
                replacements=replacements[:self.MAX_REPLACEMENTS],
                rule_id=match.ruleId,
                category=getattr(match, 'category', '') or '',
                sentence=getattr(match, 'sentence', '') or ''
            ))
        return issues

    def close(self):
        """Shut down the LanguageTool server."""
        if self.is_closed:
            return
        super().close()
        tool, self._tool = self._tool, None
        if tool is not None:
            tool.close()
