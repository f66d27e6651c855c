"""
Rules
=====
Checker classes assembled by the rule catalog.

- base: Rule, RuleMatch, RuleCheckResult, Example
- common: language-independent rules
- german: German rules
- spelling: speller rules of the regional variants
- ngram: rules needing the n-gram language model
- neuralnetwork: rules needing the word2vec model
"""

from .base import Example, Rule, RuleCheckResult, RuleMatch

__version__ = "1.0.0"

__all__ = ['Example', 'Rule', 'RuleCheckResult', 'RuleMatch']
