"""Runs every technique over the ciphertext, once per language word list.

For each language the ciphertext goes through frequency analysis, the
Caesar brute force, the fixed substitution key, the fixed Vigenere keyword
and plain reversal. Every technique is scored, whatever the others found.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import AbstractSet, List, Optional

from .breaker import best_caesar_shift
from .ciphers import caesar_decrypt, keyword_shifts, reverse_text, substitution_decrypt, vigenere_decrypt
from .config import AnalysisConfig
from .errors import InvalidKey, MissingWordList, WordListReadFailure
from .frequency import count_frequencies
from .scoring import ScoreResult, score
from .wordlists import dictionary_path, load_word_list

logger = logging.getLogger(__name__)

CAESAR = "caesar"
SUBSTITUTION = "substitution"
VIGENERE = "vigenere"
TRANSPOSITION = "transposition"
PLAIN = "plain"

# Language recorded on diagnostics that concern the whole run.
ALL_LANGUAGES = "*"

TECHNIQUES = (CAESAR, SUBSTITUTION, VIGENERE, TRANSPOSITION)


@dataclass(frozen=True)
class Diagnostic:
    language: str
    kind: str
    message: str


@dataclass
class LanguageReport:
    language: str
    text: str
    frequencies: Counter
    baseline: ScoreResult
    results: List[ScoreResult] = field(default_factory=list)

    def result(self, technique: str) -> Optional[ScoreResult]:
        for res in self.results:
            if res.technique == technique:
                return res
        return None

    @property
    def best(self) -> Optional[ScoreResult]:
        """Highest-scoring technique; the earlier technique wins a tie."""
        best = None
        for res in self.results:
            if best is None or res.valid_words > best.valid_words:
                best = res
        return best


@dataclass
class RunResult:
    reports: List[LanguageReport] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def best(self):
        """(language, ScoreResult) with the most valid words over all reports."""
        winner = None
        for report in self.reports:
            res = report.best
            if res is not None and (winner is None or res.valid_words > winner[1].valid_words):
                winner = (report.language, res)
        return winner


class Analyzer:
    """Applies the configured techniques to the configured ciphertext."""

    def __init__(self, config: AnalysisConfig = None):
        self.config = config or AnalysisConfig()

    # ------------------------ single word set ------------------------

    def analyze(self, words: AbstractSet[str], language: str = "", diagnostics: list = None,
                vigenere: bool = True) -> LanguageReport:
        """
        Runs all techniques against one word set.
        A keyword without letters drops the Vigenere result and records a
        diagnostic; the other techniques still run. ``vigenere=False`` skips
        that technique outright.
        """
        text = self.config.prepared_text()
        report = LanguageReport(
            language=language,
            text=text,
            frequencies=count_frequencies(text),
            baseline=score(PLAIN, None, text, words),
        )

        shift = best_caesar_shift(text, words, workers=self.config.workers)
        report.results.append(score(CAESAR, shift, caesar_decrypt(text, shift), words))

        report.results.append(
            score(SUBSTITUTION, None, substitution_decrypt(text, self.config.substitution_key), words))

        keyword = self.config.poly_keyword
        if vigenere:
            try:
                report.results.append(score(VIGENERE, keyword, vigenere_decrypt(text, keyword), words))
            except InvalidKey as e:
                logger.warning("Skipping Vigenere analysis for %s: %s", language or "word set", e)
                if diagnostics is not None:
                    diagnostics.append(Diagnostic(language, "InvalidKey", str(e)))

        report.results.append(score(TRANSPOSITION, None, reverse_text(text), words))
        return report

    # ------------------------ all languages ------------------------

    def run(self) -> RunResult:
        """
        Analyzes the ciphertext once per configured language.
        A missing word list skips that language; an unreadable one is
        treated as empty. Both are recorded as diagnostics. A keyword without
        letters is reported once and Vigenere is skipped for the whole run.
        """
        run = RunResult()
        vigenere = True
        try:
            keyword_shifts(self.config.poly_keyword)
        except InvalidKey as e:
            logger.warning("Skipping Vigenere analysis: %s", e)
            run.diagnostics.append(Diagnostic(ALL_LANGUAGES, "InvalidKey", str(e)))
            vigenere = False

        for language in self.config.languages:
            path = dictionary_path(self.config.dictionary_dir, language)
            try:
                words = load_word_list(path)
            except MissingWordList as e:
                logger.warning("Dictionary not found for language: %s", language)
                run.diagnostics.append(Diagnostic(language, "MissingWordList", str(e)))
                continue
            except WordListReadFailure as e:
                logger.warning("%s", e)
                run.diagnostics.append(Diagnostic(language, "WordListReadFailure", str(e)))
                words = frozenset()

            logger.info("Analyzing language: %s (%d words)", language, len(words))
            run.reports.append(self.analyze(words, language, run.diagnostics, vigenere=vigenere))
        return run
