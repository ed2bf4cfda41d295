from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of one technique: the candidate plaintext and its dictionary score."""

    technique: str
    params: Optional[str]
    text: str
    valid_words: int
    matched: FrozenSet[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict:
        return {
            "technique": self.technique,
            "params": self.params,
            "text": self.text,
            "valid_words": self.valid_words,
            "matched": sorted(self.matched),
        }


# ----------------- scoring -----------------

def score_words(text: str, words: AbstractSet[str]) -> Tuple[int, FrozenSet[str]]:
    """
    Counts the whitespace-separated tokens of ``text`` found in ``words``.

    Tokens are lowercased before the lookup, so ``words`` is expected to be
    lowercase already (load_word_list does that). Returns the number of
    matching token occurrences and the set of distinct matched words; the
    count may exceed the set size when a word repeats.
    """
    count = 0
    matched = set()
    for token in text.split():
        token = token.lower()
        if token in words:
            count += 1
            matched.add(token)
    return count, frozenset(matched)


def score(technique: str, params, text: str, words: AbstractSet[str]) -> ScoreResult:
    """Scores ``text`` and wraps it into a ScoreResult."""
    count, matched = score_words(text, words)
    return ScoreResult(
        technique=technique,
        params=None if params is None else str(params),
        text=text,
        valid_words=count,
        matched=matched,
    )
