"""Language detection model and target language resolution."""

from typing import Iterable, List, NamedTuple, Optional

from langdetect import DetectorFactory
from langdetect.detector_factory import PROFILES_DIRECTORY
from langdetect.lang_detect_exception import LangDetectException

from ..config import LANGUAGE_ALIASES, LANGUAGE_NAMES
from ..errors import UnknownLanguageError

UNKNOWN_LANG = "unknown"


class Language(NamedTuple):
    """A resolved target language."""

    code: str
    name: str

    def __str__(self) -> str:
        return self.name


class LanguageClassifier:
    """Interface for the language detector shared across worker threads.

    Implementations must be deterministic for identical text and must not
    mutate shared state in ``detect_language_of``.
    """

    def detect_language_of(self, text: str) -> Optional[str]:
        """Return the most probable language code, or None if undetermined."""
        raise NotImplementedError

    def supported_languages(self) -> List[str]:
        """Return the language codes this classifier can produce."""
        raise NotImplementedError


class LangdetectClassifier(LanguageClassifier):
    """n-gram profile classifier backed by langdetect."""

    def __init__(self, seed: int = 0):
        """Load every bundled language profile once.

        Args:
            seed: Seed for langdetect's sampling, fixed for reproducible results
        """
        factory = DetectorFactory()
        factory.seed = seed
        factory.load_profile(PROFILES_DIRECTORY)
        self._factory = factory

    def detect_language_of(self, text: str) -> Optional[str]:
        # A fresh Detector per call keeps its RNG and buffers thread-local
        detector = self._factory.create()
        detector.append(text)
        try:
            lang = detector.detect()
        except LangDetectException:
            return None
        if lang == UNKNOWN_LANG:
            return None
        return lang

    def supported_languages(self) -> List[str]:
        return list(self._factory.get_lang_list())


def load_language_detector(seed: int = 0) -> LanguageClassifier:
    """Load the default language detector.

    Args:
        seed: Seed for reproducible detection

    Returns:
        Ready-to-use classifier
    """
    return LangdetectClassifier(seed=seed)


def language_name(code: str) -> str:
    """Get the English name for a language code, falling back to the code."""
    return LANGUAGE_NAMES.get(code, code)


def resolve_language(value: str, supported: Iterable[str]) -> Language:
    """Resolve a user-supplied language code or name to a supported language.

    Common languages are matched by short code, ISO 639-2 code, English name
    or native name. Any other supported language matches by code or English
    name. Matching is case-insensitive and ignores surrounding whitespace.

    Args:
        value: Code or name given on the command line
        supported: Language codes the classifier can produce

    Returns:
        Resolved Language

    Raises:
        UnknownLanguageError: If nothing matches
    """
    key = value.strip().lower()
    supported = list(supported)

    code = LANGUAGE_ALIASES.get(key)
    if code is None:
        for candidate in supported:
            if key == candidate.lower() or key == language_name(candidate).lower():
                code = candidate
                break

    if code is None or code not in supported:
        raise UnknownLanguageError(f"Unknown language: '{key}'")
    return Language(code, language_name(code))
