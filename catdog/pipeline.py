"""
Label a directory of pet photos as Cat or Dog with a pretrained ImageNet model.

Flow: parse breed lists -> glob images -> preprocess -> load weights ->
top-1 prediction per image -> join against breed lists -> sorted table.

Usage:
    python -m catdog.pipeline --image-dir images --summary
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from catdog.config import (
    CAT_BREEDS_PATH,
    DOG_BREEDS_PATH,
    IMAGE_DIR,
    MODEL_NAME,
    TABLE_COLUMNS,
)
from catdog.data_preprocessing import get_image_files, preprocess_images
from catdog.labels import load_breed_lists
from catdog.predictor import Predictor
from catdog.utils import UNLABELED, label_agreement, plot_label_matrix, summarize_by_folder

logger = logging.getLogger("catdog.pipeline")

LOG_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'


def build_results_table(records: list) -> pd.DataFrame:
    """Collect prediction records into a table sorted by descending score (ties keep input order)."""
    df = pd.DataFrame([r.model_dump() for r in records], columns=TABLE_COLUMNS)
    df = df.sort_values("score", ascending=False, kind="mergesort")
    return df.reset_index(drop=True)


def classify_directory(
    image_dir: Path = IMAGE_DIR,
    cat_path: Path = CAT_BREEDS_PATH,
    dog_path: Path = DOG_BREEDS_PATH,
    predictor: Optional[Predictor] = None,
    model_name: str = MODEL_NAME,
) -> pd.DataFrame:
    """Run the whole labeling flow over every image below image_dir."""
    cat_breeds, dog_breeds = load_breed_lists(cat_path, dog_path)

    paths = get_image_files(Path(image_dir))
    if not paths:
        logger.warning(f"No images found in {image_dir}")
        return build_results_table([])
    logger.info(f"Found {len(paths)} images in {image_dir}")

    tensors = preprocess_images(paths)

    if predictor is None:
        predictor = Predictor(model_name=model_name)

    records = []
    for path, tensor in zip(paths, tensors):
        record = predictor.predict(tensor, path.as_posix(), cat_breeds, dog_breeds)
        logger.debug(
            f"predict | class={record.class_description} "
            f"score={record.score:.4f} catdog={record.catdog} file={record.file_name}"
        )
        records.append(record)

    df = build_results_table(records)
    counts = df["catdog"].fillna(UNLABELED).value_counts().to_dict()
    logger.info(f"Labeled {len(df)} images: {counts}")
    return df


def format_table(df: pd.DataFrame) -> str:
    return df.assign(catdog=df["catdog"].fillna(UNLABELED)).to_string(index=False)


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Label pet photos as Cat or Dog with a pretrained model")
    parser.add_argument("--image-dir", type=Path, default=IMAGE_DIR)
    parser.add_argument("--cat-breeds", type=Path, default=CAT_BREEDS_PATH)
    parser.add_argument("--dog-breeds", type=Path, default=DOG_BREEDS_PATH)
    parser.add_argument("--model", type=str, default=MODEL_NAME,
                        help="torchvision classification architecture")
    parser.add_argument("--summary", action="store_true",
                        help="Print per-folder label counts and folder agreement")
    parser.add_argument("--matrix-out", type=Path, default=None,
                        help="Write a folder-vs-label heatmap PNG to this path")
    parser.add_argument("--log-level", type=str.upper, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        df = classify_directory(
            image_dir=args.image_dir,
            cat_path=args.cat_breeds,
            dog_path=args.dog_breeds,
            model_name=args.model,
        )
    except FileNotFoundError as e:
        logger.error(str(e))
        raise SystemExit(1)

    print(format_table(df))

    if args.summary and not df.empty:
        print("\n" + summarize_by_folder(df, args.image_dir).to_string())
        agreement = label_agreement(df, args.image_dir)
        if agreement is not None:
            print(f"\nFolder agreement: {agreement * 100:.1f}%")

    if args.matrix_out is not None and not df.empty:
        args.matrix_out.parent.mkdir(parents=True, exist_ok=True)
        args.matrix_out.write_bytes(plot_label_matrix(df, args.image_dir))
        logger.info(f"Label matrix saved to {args.matrix_out}")


if __name__ == "__main__":
    main()
