import logging
from pathlib import Path
from typing import FrozenSet

from .errors import MissingWordList, WordListReadFailure

logger = logging.getLogger(__name__)


def dictionary_path(dictionary_dir, language: str) -> Path:
    """Location of a language's word list: ``<dir>/<language>_dictionary.txt``."""
    return Path(dictionary_dir) / f"{language}_dictionary.txt"


def load_word_list(path) -> FrozenSet[str]:
    """
    Load a word list, one word per line.
    Words are trimmed and lowercased; blank lines are skipped.
    """
    path = Path(path)
    if not path.is_file():
        raise MissingWordList(path)
    words = set()
    try:
        with path.open("r", encoding="utf-8") as f:
            for line in f:
                word = line.strip().lower()
                if word:
                    words.add(word)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListReadFailure(path, e) from e
    logger.debug("Loaded %d words from %s", len(words), path)
    return frozenset(words)
