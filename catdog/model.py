"""
Pretrained ImageNet classifier loading and prediction decoding.
Any torchvision classification architecture works; ResNet-50 is the default.
"""

import torch
import torch.nn as nn
from torchvision import models

from catdog.config import MODEL_NAME
from catdog.labels import normalize_label


def load_pretrained_model(model_name: str = MODEL_NAME, pretrained: bool = True) -> nn.Module:
    """Build the architecture with its default ImageNet weights, in eval mode."""
    weights = models.get_model_weights(model_name).DEFAULT if pretrained else None
    model = models.get_model(model_name, weights=weights)
    model.eval()
    return model


def get_categories(model_name: str = MODEL_NAME) -> list:
    """ImageNet class names for the architecture, normalized ('tiger cat' -> 'tiger_cat')."""
    weights = models.get_model_weights(model_name).DEFAULT
    return [normalize_label(c) for c in weights.meta["categories"]]


def decode_predictions(probs: torch.Tensor, categories: list, top: int = 1) -> list:
    """
    Turn a probability vector into the top-k (class_description, score) pairs,
    highest score first.
    """
    probs = probs.detach().flatten().cpu()
    if probs.numel() != len(categories):
        raise ValueError(
            f"Got {probs.numel()} probabilities for {len(categories)} categories"
        )
    if top < 1:
        raise ValueError(f"top must be >= 1, got {top}")

    values, indices = probs.topk(min(top, len(categories)))
    return [(categories[i], float(v)) for v, i in zip(values.tolist(), indices.tolist())]


if __name__ == "__main__":
    model = load_pretrained_model(pretrained=False)
    dummy = torch.randn(2, 3, 224, 224)
    out = model(dummy)
    print(f"Model output shape: {out.shape}")  # Expected: [2, 1000]
    total_params = sum(p.numel() for p in model.parameters())
    print(f"Total parameters: {total_params:,}")
