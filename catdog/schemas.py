"""
Pydantic schemas for prediction records.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PredictionRecord(BaseModel):
    class_description: str          # ImageNet class, e.g. "tabby"
    score: float = Field(ge=0.0, le=1.0)  # Softmax probability of that class
    catdog: Optional[str] = None    # "Cat", "Dog", or None when unlabeled
    file_name: str
