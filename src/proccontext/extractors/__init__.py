"""Extractors module initialization."""

from .base import BaseExtractor
from .sub_extractor import SubExtractor
from .python_extractor import PythonExtractor
from .ruby_extractor import RubyExtractor
from .java_extractor import JavaExtractor

__all__ = [
    "BaseExtractor",
    "SubExtractor",
    "PythonExtractor",
    "RubyExtractor",
    "JavaExtractor"
]
