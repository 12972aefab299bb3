"""
Cat/Dog labeler: pretrained ImageNet classifier + breed-name lookup lists.
"""

__version__ = "0.1.0"
