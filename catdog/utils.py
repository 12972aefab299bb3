"""
Shared utilities: folder-derived labels, summaries, visualization.
"""

import io
from pathlib import Path
from typing import Optional

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for servers/CI
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from sklearn.metrics import confusion_matrix

from catdog.config import CAT_LABEL, DOG_LABEL

UNLABELED = "NA"


# ── Folder labels ─────────────────────────────────────────────────────────────

def image_folder(path, image_dir=None) -> str:
    """
    Subfolder an image was sorted into.

    With image_dir, this is the first folder below it, so cats/siamese/a.jpg
    belongs to 'cats'. Without it, the immediate parent folder is used.
    Images directly inside image_dir have no folder ('').
    """
    path = Path(path)
    if image_dir is not None and path.is_relative_to(image_dir):
        parts = path.relative_to(image_dir).parts
        return parts[0] if len(parts) > 1 else ""
    return path.parent.name


def folder_label(path, image_dir=None) -> Optional[str]:
    """Coarse label implied by the image's subfolder: cats/ -> Cat, dogs/ -> Dog."""
    folder = image_folder(path, image_dir).lower()
    if folder.startswith("cat"):
        return CAT_LABEL
    if folder.startswith("dog"):
        return DOG_LABEL
    return None


# ── Summaries ─────────────────────────────────────────────────────────────────

def summarize_by_folder(df: pd.DataFrame, image_dir=None) -> pd.DataFrame:
    """Count predicted coarse labels per image subfolder."""
    folders = df["file_name"].map(lambda p: image_folder(p, image_dir))
    predicted = df["catdog"].fillna(UNLABELED)
    return pd.crosstab(folders.rename("folder"), predicted.rename("catdog"))


def label_agreement(df: pd.DataFrame, image_dir=None) -> Optional[float]:
    """Share of rows whose catdog label matches the folder label (None if no folder is labeled)."""
    expected = df["file_name"].map(lambda p: folder_label(p, image_dir))
    known = expected.notna()
    if not known.any():
        return None
    return float((df.loc[known, "catdog"] == expected[known]).mean())


# ── Visualization ─────────────────────────────────────────────────────────────

def plot_label_matrix(df: pd.DataFrame, image_dir=None) -> bytes:
    """Return PNG bytes of a folder-label vs predicted-label heatmap."""
    class_names = [CAT_LABEL, DOG_LABEL, UNLABELED]
    y_true = df["file_name"].map(lambda p: folder_label(p, image_dir)).fillna(UNLABELED).tolist()
    y_pred = df["catdog"].fillna(UNLABELED).tolist()
    cm = confusion_matrix(y_true, y_pred, labels=class_names)

    fig, ax = plt.subplots(figsize=(6, 5))
    sns.heatmap(cm, annot=True, fmt="d", cmap="Blues",
                xticklabels=class_names, yticklabels=class_names, ax=ax)
    ax.set_xlabel("Predicted")
    ax.set_ylabel("Folder")
    ax.set_title("Folder vs Predicted Label")
    buf = io.BytesIO()
    plt.savefig(buf, format="png", dpi=100, bbox_inches="tight")
    plt.close(fig)
    return buf.getvalue()
