"""Language detection models."""

from .language import (
    Language,
    LanguageClassifier,
    LangdetectClassifier,
    load_language_detector,
    language_name,
    resolve_language,
)

__all__ = [
    "Language",
    "LanguageClassifier",
    "LangdetectClassifier",
    "load_language_detector",
    "language_name",
    "resolve_language",
]
