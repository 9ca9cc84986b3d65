"""Chinese text to pinyin conversion package."""

from .models import ConversionOptions, ResultRecord
from .pipeline import convert, pinyin

__all__ = ["ConversionOptions", "ResultRecord", "convert", "pinyin"]
