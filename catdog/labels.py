"""
Breed-name lookup lists and the coarse Cat/Dog labeling built on them.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from catdog.config import CAT_LABEL, DOG_LABEL

logger = logging.getLogger("catdog.labels")

_WHITESPACE = re.compile(r"\s+")


def normalize_label(text: str) -> str:
    """'German shepherd ' -> 'German_shepherd'"""
    return _WHITESPACE.sub("_", text.strip())


def parse_label_file(path: Path) -> set:
    """Read a comma-separated breed file into a set of normalized names."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Label file not found: {path}")
    text = path.read_text(encoding="utf-8")
    tokens = (normalize_label(t) for t in text.split(","))
    return {t for t in tokens if t}


def load_breed_lists(cat_path: Path, dog_path: Path) -> tuple:
    """Return (cat_breeds, dog_breeds)."""
    cat_breeds = parse_label_file(cat_path)
    dog_breeds = parse_label_file(dog_path)
    logger.info(f"Loaded {len(cat_breeds)} cat breeds and {len(dog_breeds)} dog breeds")

    overlap = cat_breeds & dog_breeds
    if overlap:
        logger.warning(f"Breeds listed as both cat and dog (counted as {CAT_LABEL}): {sorted(overlap)}")
    return cat_breeds, dog_breeds


def assign_catdog(description: str, cat_breeds: set, dog_breeds: set) -> Optional[str]:
    """Map a class description onto 'Cat', 'Dog', or None when it is in neither list."""
    name = normalize_label(description)
    if name in cat_breeds:
        return CAT_LABEL
    if name in dog_breeds:
        return DOG_LABEL
    return None
