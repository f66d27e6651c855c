"""
German Language Profile
=======================
Version: 1.0.0

Describes German and its regional variants for a grammar checking engine:
- Rule catalog: base, language-model and embedding-model checker tiers
- Priority table: resolves overlapping findings between rules
- Shared resources: n-gram model, word2vec model, compound tokenizers,
  LanguageTool backend and spaCy pipelines, each initialized once

Uses lazy loading - profile classes and resources only import when accessed.
"""

__version__ = "1.0.0"

# Lazy loading implementation
# Attributes are only imported when first accessed

_EXPORTS = {
    'LanguageProfile': 'langprofile.profile',
    'German': 'langprofile.profile',
    'GermanyGerman': 'langprofile.profile',
    'AustrianGerman': 'langprofile.profile',
    'SwissGerman': 'langprofile.profile',
    'RuleCatalog': 'langprofile.catalog',
    'ResourceCache': 'langprofile.cache',
    'ComputeOnce': 'langprofile.cache',
    'RuleContext': 'langprofile.base',
    'UserConfig': 'langprofile.base',
    'Tier': 'langprofile.base',
    'priority_of': 'langprofile.priority',
    'LanguageProfileError': 'langprofile.errors',
    'ConfigurationError': 'langprofile.errors',
    'ResourceUnavailableError': 'langprofile.errors',
    'CheckerConstructionError': 'langprofile.errors',
}

_VARIANTS = ('German', 'GermanyGerman', 'AustrianGerman', 'SwissGerman')


def __getattr__(name):
    """Lazy load exported names on first access."""
    if name in _EXPORTS:
        import importlib
        module = importlib.import_module(_EXPORTS[name])
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'langprofile' has no attribute '{name}'")


def __dir__():
    return list(_EXPORTS.keys()) + ['config', 'get_status', 'get_profile']


def get_profile(language_code: str):
    """
    Get a new profile instance for a language code.

    Args:
        language_code: 'de', 'de-DE', 'de-AT' or 'de-CH'

    Raises:
        ConfigurationError: unknown language code
    """
    from .errors import ConfigurationError
    for name in _VARIANTS:
        cls = __getattr__(name)
        if (cls.VARIANT_CODE or cls.SHORT_CODE) == language_code:
            return cls()
    raise ConfigurationError(f"No language profile for '{language_code}'", key=language_code)


def get_status():
    """
    Get status of the optional resource libraries.

    Returns dict with availability and version info for each backend.
    """
    import importlib
    from . import config
    status = {
        'version': __version__,
        'variants': [(__getattr__(n).VARIANT_CODE or __getattr__(n).SHORT_CODE) for n in _VARIANTS],
        'languagetool_enabled': config.get('languagetool.enabled'),
        'libraries': {}
    }

    for library in ('language_tool_python', 'symspellpy', 'spacy'):
        library_status = {'available': False, 'version': None, 'error': None}
        try:
            mod = importlib.import_module(library)
            library_status['available'] = True
            library_status['version'] = getattr(mod, '__version__', 'unknown')
        except ImportError as e:
            library_status['error'] = str(e)
        status['libraries'][library] = library_status

    return status
