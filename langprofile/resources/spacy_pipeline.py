"""
spaCy Pipelines for German
==========================
Default tagging and sentence segmentation collaborators of a profile.

Features:
- Tagger: full German model, loaded with fallback support
- Sentence tokenizer: blank German pipeline with a rule-based sentencizer
  (no model download needed)

Both are shared handles owned by the profile's resource caches.

Requires: pip install spacy && python -m spacy download de_core_news_md
"""

from typing import Any, Dict, List, Optional, Sequence

from ..base import ResourceHandle
from ..errors import ResourceUnavailableError


class SpacyPipeline(ResourceHandle):
    """
    Loaded spaCy pipeline.

    Args:
        model_names: Models to try, in preference order. None builds the
            blank sentencizer pipeline instead.
        lang: Language code of the blank pipeline
    """

    RESOURCE_NAME = "spaCy"

    def __init__(self, model_names: Optional[Sequence[str]] = None, lang: str = "de"):
        super().__init__()
        self.lang = lang
        self.model_name: Optional[str] = None
        self._nlp = self._load(list(model_names) if model_names else [])

    def _load(self, model_names: List[str]):
        try:
            import spacy
        except ImportError as e:
            raise ResourceUnavailableError(
                f"spaCy not installed: {e}", resource=self.RESOURCE_NAME
            ) from e

        if not model_names:
            nlp = spacy.blank(self.lang)
            nlp.add_pipe("sentencizer")
            self.model_name = f"blank_{self.lang}_sentencizer"
            return nlp

        for model in model_names:
            try:
                nlp = spacy.load(model)
            except OSError:
                continue
            self.model_name = model
            return nlp

        raise ResourceUnavailableError(
            "No German spaCy model found. Install with: "
            f"python -m spacy download {model_names[0]}",
            resource=self.RESOURCE_NAME, location=', '.join(model_names)
        )

    def get_status(self) -> Dict[str, Any]:
        status = {
            'resource': self.RESOURCE_NAME,
            'model': self.model_name,
            'closed': self.is_closed,
        }
        if self._nlp is not None:
            status['pipeline'] = list(self._nlp.pipe_names)
        return status

    def _doc(self, text: str):
        if self.is_closed:
            raise ResourceUnavailableError("spaCy pipeline has been closed",
                                           resource=self.RESOURCE_NAME)
        return self._nlp(text)

    def split_sentences(self, text: str) -> List[str]:
        """Split text into sentences."""
        return [sent.text for sent in self._doc(text).sents]

    def tag(self, text: str) -> List[Dict[str, str]]:
        """
        Tag text.

        Returns:
            One dict per token with text, pos, tag and lemma
        """
        return [
            {
                'text': token.text,
                'pos': token.pos_,
                'tag': token.tag_,
                'lemma': token.lemma_,
            }
            for token in self._doc(text)
        ]

    def close(self):
        super().close()
        self._nlp = None
