"""Utility functions for modelruntime."""

from .messages import convert_messages, flatten_content, image_placeholder
from .usage import estimate_usage, INPUT_TOKEN_RATIO, OUTPUT_TOKEN_RATIO

__all__ = [
    "convert_messages",
    "flatten_content",
    "image_placeholder",
    "estimate_usage",
    "INPUT_TOKEN_RATIO",
    "OUTPUT_TOKEN_RATIO",
]
