import logging
from collections import Counter
from typing import List, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)


def count_frequencies(text: str) -> Counter:
    """
    Counts the occurrences of every alphabetic character in the text.
    Characters are counted as they appear (no case folding).
    """
    return Counter(ch for ch in text if ch.isalpha())


def sorted_frequencies(table: Counter) -> List[Tuple[str, int]]:
    """Returns (letter, count) pairs sorted by descending count."""
    return sorted(table.items(), key=lambda item: item[1], reverse=True)


# ------------------------ Bar chart ------------------------

def plot_frequencies(table: Counter, path, title: str = "Letter Frequencies") -> None:
    """
    Draws the frequency table as a bar chart and saves it to ``path``.
    Bars follow the descending-count order of sorted_frequencies().
    """
    pairs = sorted_frequencies(table)
    letters = [letter for letter, _ in pairs]
    counts = np.array([count for _, count in pairs], dtype=int)
    positions = np.arange(len(letters))

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.bar(positions, counts, color="gray")
    ax.set_xticks(positions)
    ax.set_xticklabels(letters)
    ax.set_ylabel("Count")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    logger.info("Frequency chart saved to %s", path)
