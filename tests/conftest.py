"""
Shared fixtures: a deterministic stand-in classifier and breed files.
"""

import sys
from pathlib import Path

import pytest
import torch
import torch.nn as nn

sys.path.insert(0, str(Path(__file__).parent.parent))

from catdog.model import get_categories
from catdog.predictor import Predictor

TABBY = 281
GOLDEN_RETRIEVER = 207
TENCH = 0


class ColorRuleModel(nn.Module):
    """Red-dominant images -> tabby, blue-dominant -> golden retriever."""

    def __init__(self, num_classes: int = 1000):
        super().__init__()
        self.num_classes = num_classes

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        logits = torch.zeros(x.shape[0], self.num_classes)
        red = x[:, 0].mean(dim=(1, 2))
        blue = x[:, 2].mean(dim=(1, 2))
        for i in range(x.shape[0]):
            idx = TABBY if red[i] > blue[i] else GOLDEN_RETRIEVER
            logits[i, idx] = 8.0 + float(abs(red[i] - blue[i]))
        return logits


class FixedClassModel(nn.Module):
    def __init__(self, index: int, num_classes: int = 1000):
        super().__init__()
        self.index = index
        self.num_classes = num_classes

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        logits = torch.zeros(x.shape[0], self.num_classes)
        logits[:, self.index] = 10.0
        return logits


@pytest.fixture
def categories():
    return get_categories("resnet18")


@pytest.fixture
def color_predictor(categories):
    return Predictor(model=ColorRuleModel(), categories=categories)


@pytest.fixture
def breed_files(tmp_path):
    cat_path = tmp_path / "cat_breeds.txt"
    dog_path = tmp_path / "dog_breeds.txt"
    cat_path.write_text("tabby, tiger cat, Persian cat, Siamese cat, Egyptian cat\n")
    dog_path.write_text("golden retriever,\nGerman shepherd, beagle\n")
    return cat_path, dog_path
