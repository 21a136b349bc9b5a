import threading
from pathlib import Path
from typing import List, Optional

import pyarrow as pa
import pyarrow.parquet as pq
import pytest

from babylonify.config import LANGUAGE_NAMES
from babylonify.models.language import Language, LanguageClassifier

SCENARIO_TEXTS = [
    "Привіт світ!",
    "Hello, world!",
    "Привіт, Україно! 😊 123",
    None,
    "",
]

UKRAINIAN = Language("uk", "Ukrainian")


class FakeClassifier(LanguageClassifier):
    """Script-based classifier that records every call."""

    def __init__(self):
        self.calls: List[str] = []
        self._lock = threading.Lock()

    def detect_language_of(self, text: str) -> Optional[str]:
        with self._lock:
            self.calls.append(text)
        if any(ch in "іїєґІЇЄҐ" for ch in text):
            return "uk"
        if any("Ѐ" <= ch <= "ӿ" for ch in text):
            return "ru"
        if any(ch.isascii() and ch.isalpha() for ch in text):
            return "en"
        return None

    def supported_languages(self) -> List[str]:
        return list(LANGUAGE_NAMES)


@pytest.fixture
def classifier() -> FakeClassifier:
    return FakeClassifier()


def write_transcriptions(path: Path, texts=SCENARIO_TEXTS, column: str = "transcription") -> Path:
    table = pa.table({
        "id": pa.array(list(range(len(texts))), type=pa.int32()),
        column: pa.array(texts, type=pa.string()),
    })
    pq.write_table(table, path)
    return path


@pytest.fixture
def scenario_parquet(tmp_path: Path) -> Path:
    return write_transcriptions(tmp_path / "in.parquet")


@pytest.fixture
def make_parquet():
    return write_transcriptions


@pytest.fixture
def ukrainian() -> Language:
    return UKRAINIAN


@pytest.fixture
def scenario_texts() -> List[Optional[str]]:
    return list(SCENARIO_TEXTS)
