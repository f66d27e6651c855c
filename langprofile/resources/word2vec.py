"""
Word2Vec Model Handle
=====================
Handle on the word-embedding model used by the neural network rules.

Layout of <index_dir>/<language code>/:
- dictionary.txt         vocabulary
- final_embeddings.txt   embedding matrix
- neuralnetwork/<set>/   one directory per confusion set, holding the
                         trained weights (W_fc1.txt, b_fc1.txt)
"""

from pathlib import Path
from typing import Any, Dict, List, Union

from ..base import ResourceHandle
from ..errors import ResourceUnavailableError


class Word2VecModel(ResourceHandle):
    """Validated, closeable reference to a word2vec model directory."""

    RESOURCE_NAME = "word2vec model"
    DICTIONARY_FILE = "dictionary.txt"
    EMBEDDINGS_FILE = "final_embeddings.txt"
    NEURAL_NETWORK_DIR = "neuralnetwork"

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self.path = Path(path)
        for name in (self.DICTIONARY_FILE, self.EMBEDDINGS_FILE):
            if not (self.path / name).is_file():
                raise ResourceUnavailableError(
                    f"Word2vec model at {self.path} is missing {name}",
                    resource=self.RESOURCE_NAME, location=str(self.path / name)
                )

    @property
    def dictionary_path(self) -> Path:
        return self.path / self.DICTIONARY_FILE

    @property
    def embeddings_path(self) -> Path:
        return self.path / self.EMBEDDINGS_FILE

    def confusion_set_dirs(self) -> List[Path]:
        """Trained confusion-set directories, sorted by name."""
        nn_dir = self.path / self.NEURAL_NETWORK_DIR
        if not nn_dir.is_dir():
            return []
        return sorted((p for p in nn_dir.iterdir() if p.is_dir()), key=lambda p: p.name)

    def get_status(self) -> Dict[str, Any]:
        return {
            'resource': self.RESOURCE_NAME,
            'path': str(self.path),
            'confusion_sets': len(self.confusion_set_dirs()),
            'closed': self.is_closed,
        }
