import pytest

from voynich.errors import MissingWordList, WordListReadFailure
from voynich.wordlists import dictionary_path, load_word_list


def test_dictionary_path(tmp_path):
    assert dictionary_path(tmp_path, "latin") == tmp_path / "latin_dictionary.txt"


def test_load_trims_and_lowercases(tmp_path):
    path = tmp_path / "latin_dictionary.txt"
    path.write_text("Hello\n  World \n\nhello\n", encoding="utf-8")
    assert load_word_list(path) == {"hello", "world"}


def test_missing_list(tmp_path):
    with pytest.raises(MissingWordList):
        load_word_list(tmp_path / "klingon_dictionary.txt")


def test_directory_is_not_a_list(tmp_path):
    with pytest.raises(MissingWordList):
        load_word_list(tmp_path)


def test_unreadable_list(tmp_path):
    path = tmp_path / "broken_dictionary.txt"
    path.write_bytes(b"ok\n\xff\xfe\xfa\n")
    with pytest.raises(WordListReadFailure) as excinfo:
        load_word_list(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
