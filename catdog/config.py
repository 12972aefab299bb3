"""
Runtime configuration for the Cat/Dog labeler.
Defaults live here; environment variables override them, CLI flags override both.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────────────────────
DATA_DIR = Path(__file__).resolve().parent / "data"  # bundled breed lists
IMAGE_DIR = Path(os.getenv("IMAGE_DIR", "images"))
CAT_BREEDS_PATH = Path(os.getenv("CAT_BREEDS_PATH", DATA_DIR / "cat_breeds.txt"))
DOG_BREEDS_PATH = Path(os.getenv("DOG_BREEDS_PATH", DATA_DIR / "dog_breeds.txt"))

# ── Model ─────────────────────────────────────────────────────────────────────
MODEL_NAME = os.getenv("MODEL_NAME", "resnet50")
IMAGE_SIZE = 224

# ImageNet normalization expected by the pretrained weights
MEAN = [0.485, 0.456, 0.406]
STD = [0.229, 0.224, 0.225]

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")

# ── Labels / output ───────────────────────────────────────────────────────────
CAT_LABEL = "Cat"
DOG_LABEL = "Dog"
TABLE_COLUMNS = ["class_description", "score", "catdog", "file_name"]
