"""Configuration constants and settings for the babylonify language filter."""

# Input/output configuration
DEFAULT_TEXT_COLUMN = "transcription"
DEFAULT_LANG = "uk"
PARQUET_EXTENSION = ".parquet"
PARQUET_COMPRESSION = "zstd"

# Processing configuration
CLASSIFY_CHUNK_SIZE = 256  # Rows handed to one worker task

# Audit log configuration
AUDIT_LOG_FILENAME = "language_filter.jsonl"
AUDIT_SAMPLE_SIZE = 20  # Per decision (kept/dropped) and per file

# Target language aliases: short codes, ISO 639-2 codes, English and native names
LANGUAGE_ALIASES = {
    "uk": "uk", "ukr": "uk", "ukrainian": "uk", "українська": "uk",
    "en": "en", "eng": "en", "english": "en",
    "ru": "ru", "rus": "ru", "russian": "ru", "русский": "ru",
    "pl": "pl", "polish": "pl", "polski": "pl",
    "de": "de", "german": "de", "deutsch": "de",
    "fr": "fr", "french": "fr", "français": "fr",
    "es": "es", "spanish": "es", "español": "es",
}

# English names for the language profiles shipped with langdetect
LANGUAGE_NAMES = {
    "af": "Afrikaans", "ar": "Arabic", "bg": "Bulgarian", "bn": "Bengali",
    "ca": "Catalan", "cs": "Czech", "cy": "Welsh", "da": "Danish",
    "de": "German", "el": "Greek", "en": "English", "es": "Spanish",
    "et": "Estonian", "fa": "Persian", "fi": "Finnish", "fr": "French",
    "gu": "Gujarati", "he": "Hebrew", "hi": "Hindi", "hr": "Croatian",
    "hu": "Hungarian", "id": "Indonesian", "it": "Italian", "ja": "Japanese",
    "kn": "Kannada", "ko": "Korean", "lt": "Lithuanian", "lv": "Latvian",
    "mk": "Macedonian", "ml": "Malayalam", "mr": "Marathi", "ne": "Nepali",
    "nl": "Dutch", "no": "Norwegian", "pa": "Punjabi", "pl": "Polish",
    "pt": "Portuguese", "ro": "Romanian", "ru": "Russian", "sk": "Slovak",
    "sl": "Slovenian", "so": "Somali", "sq": "Albanian", "sv": "Swedish",
    "sw": "Swahili", "ta": "Tamil", "te": "Telugu", "th": "Thai",
    "tl": "Tagalog", "tr": "Turkish", "uk": "Ukrainian", "ur": "Urdu",
    "vi": "Vietnamese", "zh-cn": "Chinese (Simplified)", "zh-tw": "Chinese (Traditional)",
}
