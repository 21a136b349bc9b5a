"""Text normalization for transcriptions before language detection."""

import regex as re

# Compiled regex patterns, built once at import
_whitespace_re = re.compile(r"\s+")
_drop_non_letter_punct_re = re.compile(r"[^ \p{L}\p{P}]")
_extra_symbols = str.maketrans("", "", "@#%&*()")


def clean_text(text: str) -> str:
    """Remove all symbols except letters, spaces and punctuation.

    Digits, emoji and other symbol/control characters are dropped. The final
    double-space collapse is a single pass, so runs of three or more spaces
    left after symbol removal may not shrink to one.

    Args:
        text: Raw cell text

    Returns:
        Cleaned text, possibly empty
    """
    text = _whitespace_re.sub(" ", text)
    text = _drop_non_letter_punct_re.sub("", text)
    text = text.replace("\t", " ")
    text = text.translate(_extra_symbols)
    text = text.replace("  ", " ")
    return text.strip()
