import pytest

from voynich.config import AnalysisConfig


@pytest.fixture
def dictionary_dir(tmp_path):
    """Word lists for 'english' and an unreadable 'broken' list; no 'klingon'."""
    (tmp_path / "english_dictionary.txt").write_text("There\nis\nthe\ncat\n", encoding="utf-8")
    (tmp_path / "broken_dictionary.txt").write_bytes(b"\xff\xfe\xfa\n")
    return tmp_path


@pytest.fixture
def config(dictionary_dir):
    return AnalysisConfig(
        ciphertext="wkhuh lv",
        languages=("english", "klingon"),
        dictionary_dir=dictionary_dir,
    )
