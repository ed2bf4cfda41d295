"""Classical cryptanalysis of a short Voynich-style ciphertext snippet."""

from .ciphers import (
    caesar_decrypt,
    caesar_encrypt,
    reverse_text,
    substitution_decrypt,
    vigenere_decrypt,
    vigenere_encrypt,
)
from .frequency import count_frequencies, sorted_frequencies
from .scoring import ScoreResult, score_words
from .breaker import best_caesar_shift
from .config import AnalysisConfig, load_config
from .analyzer import Analyzer, LanguageReport, RunResult, Diagnostic
from .errors import VoynichError, MissingWordList, WordListReadFailure, InvalidKey, ConfigError

__version__ = "1.6.0"

__all__ = [
    "caesar_decrypt",
    "caesar_encrypt",
    "reverse_text",
    "substitution_decrypt",
    "vigenere_decrypt",
    "vigenere_encrypt",
    "count_frequencies",
    "sorted_frequencies",
    "ScoreResult",
    "score_words",
    "best_caesar_shift",
    "AnalysisConfig",
    "load_config",
    "Analyzer",
    "LanguageReport",
    "RunResult",
    "Diagnostic",
    "VoynichError",
    "MissingWordList",
    "WordListReadFailure",
    "InvalidKey",
    "ConfigError",
]
