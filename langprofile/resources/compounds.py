"""
German Compound Tokenizer
=========================
Splits German compounds ("Haustür" -> "Haus", "tür") with SymSpell word
segmentation over a German frequency dictionary.

Variants:
- strict: only splits when every part is a known word
- non-strict: tolerates spelling mistakes inside the parts (a typo in one
  part would otherwise keep the word from being split at all)

Requires: pip install symspellpy
"""

import unicodedata
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..base import ResourceHandle
from ..errors import ResourceUnavailableError


class GermanCompoundTokenizer(ResourceHandle):
    """
    SymSpell-backed compound splitter.

    The dictionary file holds one "term count" pair per line.
    """

    RESOURCE_NAME = "compound tokenizer"
    PREFIX_LENGTH = 7
    MIN_WORD_LENGTH = 4

    def __init__(
        self,
        strict: bool = True,
        dictionary_path: Optional[Union[str, Path]] = None,
        max_edit_distance: int = 2
    ):
        """
        Load the dictionary.

        Args:
            strict: Split only into known words
            dictionary_path: German frequency dictionary
            max_edit_distance: Part tolerance of the non-strict variant

        Raises:
            ResourceUnavailableError: symspellpy missing or dictionary not loadable
        """
        super().__init__()
        self.strict = strict
        self.dictionary_path = Path(dictionary_path) if dictionary_path else None
        self.max_edit_distance = 0 if strict else max_edit_distance
        self._sym_spell = self._load_dictionary()

    def _load_dictionary(self):
        try:
            from symspellpy import SymSpell
        except ImportError as e:
            raise ResourceUnavailableError(
                f"symspellpy not installed: {e}", resource=self.RESOURCE_NAME
            ) from e

        if self.dictionary_path is None or not self.dictionary_path.is_file():
            raise ResourceUnavailableError(
                f"Could not set up German compound splitter: dictionary not found "
                f"({self.dictionary_path})",
                resource=self.RESOURCE_NAME,
                location=str(self.dictionary_path) if self.dictionary_path else None
            )

        sym_spell = SymSpell(
            max_dictionary_edit_distance=self.max_edit_distance,
            prefix_length=self.PREFIX_LENGTH
        )
        loaded = sym_spell.load_dictionary(
            str(self.dictionary_path), term_index=0, count_index=1, encoding='utf-8'
        )
        if not loaded or not sym_spell.words:
            raise ResourceUnavailableError(
                f"Compound dictionary {self.dictionary_path} is empty or unreadable",
                resource=self.RESOURCE_NAME, location=str(self.dictionary_path)
            )
        return sym_spell

    def is_known(self, word: str) -> bool:
        return word.lower() in self._sym_spell.words

    def tokenize(self, word: str) -> List[str]:
        """
        Split a word into its compound parts.

        Args:
            word: A single word

        Returns:
            The parts in original casing, or [word] if it is not split
        """
        if self.is_closed:
            raise ResourceUnavailableError("Compound tokenizer has been closed",
                                           resource=self.RESOURCE_NAME)
        if len(word) < self.MIN_WORD_LENGTH or not word.isalpha():
            return [word]

        normalized = unicodedata.normalize("NFKC", word)
        composition = self._sym_spell.word_segmentation(
            normalized.lower(), max_edit_distance=self.max_edit_distance
        )
        parts = composition.segmented_string.split()
        if len(parts) < 2 or ''.join(parts) != normalized.lower():
            return [word]

        if self.strict:
            accepted = all(self.is_known(part) for part in parts)
        else:
            corrected = composition.corrected_string.split()
            accepted = len(corrected) == len(parts) and all(self.is_known(p) for p in corrected)
        if not accepted:
            return [word]

        tokens = []
        start = 0
        for part in parts:
            tokens.append(normalized[start:start + len(part)])
            start += len(part)
        return tokens

    __call__ = tokenize

    def get_status(self) -> Dict[str, Any]:
        return {
            'resource': self.RESOURCE_NAME,
            'strict': self.strict,
            'dictionary': str(self.dictionary_path),
            'dictionary_size': len(self._sym_spell.words),
            'closed': self.is_closed,
        }
