"""
N-gram Language Model Handle
============================
Handle on an on-disk n-gram index used by the language-model tier.

The index lives in <index_dir>/<language code>/ and must contain the
1grams, 2grams and 3grams sub-directories. Reading the index format is
left to the consuming rules; this handle validates the layout and owns
the open state.
"""

from pathlib import Path
from typing import Any, Dict, List, Union

from ..base import ResourceHandle
from ..errors import ResourceUnavailableError


class NgramLanguageModel(ResourceHandle):
    """Validated, closeable reference to an n-gram index directory."""

    RESOURCE_NAME = "n-gram language model"
    NGRAM_DIRS = ("1grams", "2grams", "3grams")

    def __init__(self, top_dir: Union[str, Path]):
        super().__init__()
        self.top_dir = Path(top_dir)
        self.ngram_dirs: List[Path] = self.validate_directory(self.top_dir)

    @classmethod
    def validate_directory(cls, top_dir: Path) -> List[Path]:
        """
        Check the index layout.

        Raises:
            ResourceUnavailableError: directory or one of its n-gram parts missing
        """
        if not top_dir.is_dir():
            raise ResourceUnavailableError(
                f"Language model directory not found: {top_dir}",
                resource=cls.RESOURCE_NAME, location=str(top_dir)
            )
        dirs = []
        for name in cls.NGRAM_DIRS:
            sub_dir = top_dir / name
            if not sub_dir.is_dir():
                raise ResourceUnavailableError(
                    f"Language model directory {top_dir} has no '{name}' sub directory",
                    resource=cls.RESOURCE_NAME, location=str(sub_dir)
                )
            dirs.append(sub_dir)
        return dirs

    def get_status(self) -> Dict[str, Any]:
        return {
            'resource': self.RESOURCE_NAME,
            'path': str(self.top_dir),
            'closed': self.is_closed,
        }
