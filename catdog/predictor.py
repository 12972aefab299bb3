"""
Model loading and inference logic.
The model is loaded once and reused for every image in a run.
"""

import logging
from typing import Optional

import torch
import torch.nn as nn

from catdog.config import MODEL_NAME
from catdog.labels import assign_catdog
from catdog.model import decode_predictions, get_categories, load_pretrained_model
from catdog.schemas import PredictionRecord

logger = logging.getLogger("catdog.predictor")


class Predictor:
    """Wraps a pretrained classifier for single-image top-1 prediction."""

    def __init__(
        self,
        model_name: str = MODEL_NAME,
        pretrained: bool = True,
        model: Optional[nn.Module] = None,
        categories: Optional[list] = None,
    ):
        self.device = torch.device("cuda" if torch.cuda.is_available() else "cpu")
        self.model_name = model_name
        if model is None:
            logger.info(f"Loading {model_name} (pretrained={pretrained})")
            model = load_pretrained_model(model_name, pretrained=pretrained)
        self.model = model.to(self.device)
        self.model.eval()
        self.categories = categories if categories is not None else get_categories(model_name)
        self.loaded = True

    @torch.no_grad()
    def predict(
        self,
        tensor: torch.Tensor,
        file_name: str,
        cat_breeds: set,
        dog_breeds: set,
    ) -> PredictionRecord:
        """
        Given a preprocessed [1, 3, H, W] tensor, return the top-1 class,
        its probability and the coarse Cat/Dog label.
        """
        logits = self.model(tensor.to(self.device))     # shape: [1, num_classes]
        probs = torch.softmax(logits, dim=1)[0]
        description, score = decode_predictions(probs, self.categories, top=1)[0]

        return PredictionRecord(
            class_description=description,
            score=min(max(score, 0.0), 1.0),
            catdog=assign_catdog(description, cat_breeds, dog_breeds),
            file_name=file_name,
        )
