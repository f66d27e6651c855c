"""
Shared Resources
================
Heavy linguistic resources owned by a language profile:
- NgramLanguageModel: n-gram index for the language-model tier
- Word2VecModel: embeddings for the neural network tier
- GermanCompoundTokenizer: strict and non-strict compound splitters
- LanguageToolBackend: detection engine behind the rules
- SpacyPipeline: tagger and sentence tokenizer

Loaders are imported lazily so the optional libraries are only needed
when the corresponding resource is requested.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

__version__ = "1.0.0"


def load_language_model(path):
    from .ngram import NgramLanguageModel
    return NgramLanguageModel(path)


def load_word2vec_model(path):
    from .word2vec import Word2VecModel
    return Word2VecModel(path)


def load_compound_tokenizer(strict: bool, dictionary_path, max_edit_distance: int = 2):
    from .compounds import GermanCompoundTokenizer
    return GermanCompoundTokenizer(strict, dictionary_path, max_edit_distance)


def load_grammar_backend(language: str, config, language_model_dir: Optional[str] = None):
    from .languagetool import LanguageToolBackend
    return LanguageToolBackend(language, config, language_model_dir)


def load_spacy_pipeline(model_names: Optional[Sequence[str]] = None):
    from .spacy_pipeline import SpacyPipeline
    return SpacyPipeline(model_names)


@dataclass
class ResourceLoaders:
    """
    Constructors for every shared resource kind.

    Swap any of them to plug in another implementation (tests use fakes).
    """
    language_model: Callable = load_language_model
    word2vec_model: Callable = load_word2vec_model
    compound_tokenizer: Callable = load_compound_tokenizer
    grammar_backend: Callable = load_grammar_backend
    spacy_pipeline: Callable = load_spacy_pipeline
