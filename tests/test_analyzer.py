from voynich.analyzer import (
    CAESAR,
    PLAIN,
    SUBSTITUTION,
    TECHNIQUES,
    TRANSPOSITION,
    VIGENERE,
    ALL_LANGUAGES,
    Analyzer,
)
from voynich.ciphers import vigenere_decrypt


def test_run_skips_missing_language(config):
    run = Analyzer(config).run()
    assert [r.language for r in run.reports] == ["english"]
    assert len(run.diagnostics) == 1
    diag = run.diagnostics[0]
    assert diag.language == "klingon"
    assert diag.kind == "MissingWordList"


def test_all_techniques_reported(config):
    report = Analyzer(config).run().reports[0]
    assert [r.technique for r in report.results] == list(TECHNIQUES)

    caesar = report.result(CAESAR)
    assert caesar.params == "3"
    assert caesar.text == "there is"
    assert caesar.valid_words == 2
    assert caesar.matched == {"there", "is"}

    substitution = report.result(SUBSTITUTION)
    assert substitution.text == "wkhuh lv"
    assert substitution.valid_words == 0

    vigenere = report.result(VIGENERE)
    assert vigenere.params == "VOYNICH"
    assert vigenere.text == vigenere_decrypt("wkhuh lv", "VOYNICH")

    transposition = report.result(TRANSPOSITION)
    assert transposition.text == "vl huhkw"
    assert transposition.valid_words == 0

    assert report.baseline.technique == PLAIN
    assert report.baseline.valid_words == 0
    assert report.best is caesar


def test_frequencies_of_prepared_text(config):
    report = Analyzer(config.override(ciphertext="Wkhuh, lv!")).run().reports[0]
    assert report.text == "wkhuh lv"
    assert report.frequencies["h"] == 2
    assert "," not in report.frequencies


def test_unreadable_list_scores_zero(config):
    run = Analyzer(config.override(languages=("broken", "english"))).run()
    assert [r.language for r in run.reports] == ["broken", "english"]
    broken = run.reports[0]
    assert all(r.valid_words == 0 for r in broken.results)
    assert broken.result(CAESAR).params == "0"
    assert [d.kind for d in run.diagnostics] == ["WordListReadFailure"]


def test_invalid_keyword_skips_only_vigenere(config):
    run = Analyzer(config.override(poly_keyword="123")).run()
    report = run.reports[0]
    assert report.result(VIGENERE) is None
    assert [r.technique for r in report.results] == [CAESAR, SUBSTITUTION, TRANSPOSITION]
    assert report.result(CAESAR).valid_words == 2
    assert [d.kind for d in run.diagnostics] == ["InvalidKey", "MissingWordList"]
    assert run.diagnostics[0].language == ALL_LANGUAGES


def test_analyze_single_word_set():
    analyzer = Analyzer()
    report = analyzer.analyze(frozenset(), "none")
    assert report.text.startswith("possheody")
    assert len(report.results) == 4
    assert all(r.valid_words == 0 for r in report.results)
    # nothing scored, the first technique is kept
    assert report.best.technique == CAESAR


def test_best_over_languages(config):
    run = Analyzer(config.override(languages=("broken", "english"))).run()
    language, res = run.best()
    assert language == "english"
    assert res.technique == CAESAR


def test_no_languages():
    run = Analyzer(Analyzer().config.override(languages=())).run()
    assert run.reports == []
    assert run.best() is None


def test_invalid_keyword_reported_once_per_run(config):
    run = Analyzer(config.override(poly_keyword="", languages=("english", "broken"))).run()
    assert len(run.reports) == 2
    assert all(report.result(VIGENERE) is None for report in run.reports)
    invalid = [d for d in run.diagnostics if d.kind == "InvalidKey"]
    assert len(invalid) == 1
    assert invalid[0].language == ALL_LANGUAGES


def test_analyze_can_skip_vigenere():
    report = Analyzer().analyze(frozenset({"the"}), "english", vigenere=False)
    assert [r.technique for r in report.results] == [CAESAR, SUBSTITUTION, TRANSPOSITION]


def test_analyze_direct_call_with_bad_keyword():
    diagnostics = []
    analyzer = Analyzer(Analyzer().config.override(poly_keyword="42"))
    report = analyzer.analyze(frozenset(), "latin", diagnostics)
    assert report.result(VIGENERE) is None
    assert [(d.language, d.kind) for d in diagnostics] == [("latin", "InvalidKey")]
