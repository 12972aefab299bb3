"""
Image preprocessing for the Cat/Dog labeler.
- Collects image files below an input directory
- Resizes images to 224x224 RGB
- Converts to a normalized, batched tensor the pretrained model accepts
"""

import logging
from pathlib import Path

import numpy as np
import torch
from PIL import Image
from torchvision import transforms

from catdog.config import IMAGE_EXTENSIONS, IMAGE_SIZE, MEAN, STD

logger = logging.getLogger("catdog.preprocessing")


def get_image_files(directory: Path, extensions: tuple = IMAGE_EXTENSIONS) -> list:
    """Recursively collect image file paths from a directory."""
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Image directory not found: {directory}")
    files = [
        p for p in directory.rglob("*")
        if p.is_file() and p.suffix.lower() in extensions
    ]
    return sorted(files)


def get_transforms(image_size: int = IMAGE_SIZE) -> transforms.Compose:
    """Deterministic resize + ImageNet normalization."""
    return transforms.Compose([
        transforms.Resize((image_size, image_size)),
        transforms.ToTensor(),
        transforms.Normalize(mean=MEAN, std=STD),
    ])


def preprocess_image(path: Path, image_size: int = IMAGE_SIZE) -> torch.Tensor:
    """
    Load one image and turn it into model input.

    Returns a float tensor of shape [1, 3, image_size, image_size].
    """
    with Image.open(path) as img:
        tensor = get_transforms(image_size)(img.convert("RGB"))
    return tensor.unsqueeze(0)


def preprocess_images(paths: list, image_size: int = IMAGE_SIZE) -> list:
    tensors = [preprocess_image(p, image_size) for p in paths]
    logger.info(f"Preprocessed {len(tensors)} images to {image_size}x{image_size}")
    return tensors


def create_dummy_dataset(out_dir: Path, n_per_class: int = 5) -> None:
    """
    Create a tiny dummy dataset (solid-color images) for testing/CI purposes.
    Produces n_per_class images per class in out_dir/<class>/.
    """
    colors = {"cat": (200, 100, 80), "dog": (80, 120, 200)}
    for cls, color in colors.items():
        cls_dir = Path(out_dir) / cls
        cls_dir.mkdir(parents=True, exist_ok=True)
        for i in range(n_per_class):
            img = Image.fromarray(
                np.full((64, 64, 3), color, dtype=np.uint8)
            )
            img.save(cls_dir / f"{cls}_{i:04d}.jpg")
    logger.info(f"[Dummy dataset] Created {n_per_class} images per class in '{out_dir}'")
