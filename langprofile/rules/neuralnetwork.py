"""
Neural Network Rules
====================
One rule per trained confusion set of the word2vec model.

A confusion set lives in <model>/neuralnetwork/<word1>_<word2>[_...]/ and
holds the weights of its classifier (W_fc1.txt, b_fc1.txt). Rules are
created in directory-name order, so the tier is reproducible.
"""

from pathlib import Path
from typing import Any, List, Sequence

from ..base import RuleContext, Tier
from ..errors import ResourceUnavailableError
from ..log import get_logger
from .base import Rule

logger = get_logger(__name__)

WEIGHT_FILES = ("W_fc1.txt", "b_fc1.txt")


class NeuralNetworkRule(Rule):
    """Classifier deciding between the words of one confusion set."""

    RULE_ID = "NEURALNETWORK"
    CATEGORY_ID = "CONFUSED_WORDS"
    DESCRIPTION = "Mögliche Wortverwechslung"
    TIER = Tier.EMBEDDING_MODEL

    def __init__(self, context: RuleContext, word2vec_model: Any,
                 subjects: Sequence[str], weights_dir: Path, **kwargs):
        if len(subjects) < 2:
            raise ValueError(f"A confusion set needs at least two words, got {list(subjects)}")
        for name in WEIGHT_FILES:
            if not (weights_dir / name).is_file():
                raise ResourceUnavailableError(
                    f"Confusion set {weights_dir.name} is missing {name}",
                    resource="word2vec_model", location=str(weights_dir / name)
                )
        self.subjects = tuple(subjects)
        self.language_code = context.language.short_code
        super().__init__(context, **kwargs)
        self.word2vec_model = word2vec_model
        self.weights_dir = weights_dir
        self.description = context.message(
            'neural_network_rule', "Mögliche Verwechslung von {}"
        ).format('/'.join(self.subjects))

    @property
    def rule_id(self) -> str:
        words = '_'.join(s.upper() for s in self.subjects)
        return f"{self.language_code.upper()}_{words}_{self.RULE_ID}"


def create_rules(context: RuleContext, word2vec_model: Any) -> List[Rule]:
    """
    Build one NeuralNetworkRule per confusion-set directory.

    Args:
        context: Rule construction context
        word2vec_model: Word2VecModel handle

    Returns:
        Rules sorted by confusion-set name (empty if the model has none)
    """
    set_dirs = word2vec_model.confusion_set_dirs()
    if not set_dirs:
        logger.debug("Word2vec model has no trained confusion sets",
                     path=str(getattr(word2vec_model, 'path', '')))
    return [
        NeuralNetworkRule(context, word2vec_model, set_dir.name.split('_'), set_dir)
        for set_dir in set_dirs
    ]
