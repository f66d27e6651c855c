"""
Language Profile Configuration
==============================
Centralized configuration for resources, the grammar backend, the rule
catalog and logging.

Configuration can be set via:
1. Environment variables (LP_NGRAM_DIR=/data/ngrams)
2. Config file (langprofile_config.json, or the path in LANGPROFILE_CONFIG)
3. Direct API calls (config.set('catalog.long_sentence_max_words', 40))

Every setting has a default that works without any model on disk; tiers that
need a resource simply stay unavailable until a location is configured.
"""

import os
import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass, field, asdict

from .errors import ConfigurationError

__version__ = "1.0.0"

# Default configuration path
CONFIG_FILE = Path(__file__).parent.parent / "langprofile_config.json"


@dataclass
class ResourceConfig:
    """Locations of the shared linguistic resources."""
    ngram_dir: Optional[str] = None          # parent of de/1grams, de/2grams, de/3grams
    word2vec_dir: Optional[str] = None       # parent of de/dictionary.txt, de/final_embeddings.txt
    compound_dictionary: Optional[str] = None  # "term count" frequency list
    compound_max_edit_distance: int = 2       # tolerance of the non-strict splitter
    spacy_models: list = field(default_factory=lambda: [
        "de_core_news_md", "de_core_news_sm", "de_core_news_lg"
    ])


@dataclass
class LanguageToolConfig:
    """Grammar backend (LanguageTool) configuration."""
    enabled: bool = True
    remote_server: Optional[str] = None  # None = local server started by language_tool_python
    cache_size: int = 1000
    pipeline_caching: bool = True


@dataclass
class CatalogConfig:
    """Default thresholds handed to configurable rules."""
    long_sentence_max_words: int = 35
    long_paragraph_max_words: int = 220
    filler_words_percent: int = 8
    repeated_word_distance: int = 1


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "json"  # Options: json, text
    to_console: bool = True


@dataclass
class ProfileConfig:
    """Master configuration."""
    resources: ResourceConfig = field(default_factory=ResourceConfig)
    languagetool: LanguageToolConfig = field(default_factory=LanguageToolConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
_config: Optional[ProfileConfig] = None


def get_config() -> ProfileConfig:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = _load_config()
    return _config


def get_logging_config() -> LoggingConfig:
    """
    Get the logging section only.

    Before the global configuration is loaded, only the logging settings of
    the config file and environment are read, so an invalid catalog or
    resource override never breaks logger setup.
    """
    if _config is not None:
        return _config.logging
    return _load_config(sections=('logging',)).logging


def _config_path() -> Path:
    override = os.environ.get('LANGPROFILE_CONFIG')
    return Path(override) if override else CONFIG_FILE


def _load_config(sections: Optional[Tuple[str, ...]] = None) -> ProfileConfig:
    """Load configuration from file and environment, optionally limited to some sections."""
    config = ProfileConfig()

    path = _config_path()
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            raise ConfigurationError(f"Could not load config file {path}: {e}",
                                     key=str(path)) from e
        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Config file {path} must hold a JSON object",
                                     key=str(path))
        if sections is not None:
            file_config = {k: v for k, v in file_config.items() if k in sections}
        _apply_dict_to_config(config, file_config)

    _apply_env_to_config(config, sections)

    return config


def _apply_dict_to_config(config: ProfileConfig, data: Dict[str, Any]):
    """Apply dictionary values to config object."""
    for section_name, section_data in data.items():
        if hasattr(config, section_name) and isinstance(section_data, dict):
            section = getattr(config, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)


def _apply_env_to_config(config: ProfileConfig, sections: Optional[Tuple[str, ...]] = None):
    """Apply environment variables to config."""
    env_mappings = {
        'LP_NGRAM_DIR': ('resources', 'ngram_dir', str),
        'LP_WORD2VEC_DIR': ('resources', 'word2vec_dir', str),
        'LP_COMPOUND_DICTIONARY': ('resources', 'compound_dictionary', str),
        'LP_LANGUAGETOOL_ENABLED': ('languagetool', 'enabled', _parse_bool),
        'LP_LANGUAGETOOL_SERVER': ('languagetool', 'remote_server', str),
        'LP_LONG_SENTENCE_MAX_WORDS': ('catalog', 'long_sentence_max_words', int),
        'LP_LOG_LEVEL': ('logging', 'level', str),
        'LP_LOG_FORMAT': ('logging', 'format', str),
    }

    for env_var, (section, key, converter) in env_mappings.items():
        if sections is not None and section not in sections:
            continue
        value = os.environ.get(env_var)
        if value is not None:
            try:
                setattr(getattr(config, section), key, converter(value))
            except ValueError as e:
                raise ConfigurationError(f"Invalid env var {env_var}={value}: {e}",
                                         key=env_var) from e


def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ('true', '1', 'yes', 'on')


def get(key: str, default: Any = None) -> Any:
    """
    Get a configuration value by dot-notation key.

    Example: get('catalog.long_sentence_max_words') -> 35
    """
    obj = get_config()
    for part in key.split('.'):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            return default
    return obj


def set(key: str, value: Any):
    """
    Set a configuration value by dot-notation key.

    Example: set('resources.ngram_dir', '/data/ngrams')
    """
    config = get_config()
    parts = key.split('.')

    if len(parts) != 2:
        raise ConfigurationError(f"Key must be in format 'section.key': {key}", key=key)

    section_name, attr_name = parts
    if not hasattr(config, section_name):
        raise ConfigurationError(f"Unknown config section: {section_name}", key=key)
    section = getattr(config, section_name)
    if not hasattr(section, attr_name):
        raise ConfigurationError(f"Unknown config key: {attr_name}", key=key)
    setattr(section, attr_name, value)


def save_config(path: Optional[Path] = None):
    """Save current configuration to file."""
    path = path or _config_path()
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(asdict(get_config()), f, indent=2)


def reset_config():
    """Reset configuration to defaults (for testing)."""
    global _config
    _config = ProfileConfig()
