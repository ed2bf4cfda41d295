import json
import sys

from .analyzer import CAESAR, SUBSTITUTION, TRANSPOSITION, VIGENERE, LanguageReport, RunResult
from .frequency import sorted_frequencies

TITLES = {
    CAESAR: "Caesar Cipher",
    SUBSTITUTION: "Monoalphabetic Substitution",
    VIGENERE: "Vigenere Cipher",
    TRANSPOSITION: "Transposition Cipher",
}


def _matched(words) -> str:
    return "{" + ", ".join(sorted(words)) + "}"


def print_language_report(report: LanguageReport, out=None) -> None:
    """Prints the full landscape of results for one language."""
    out = sys.stdout if out is None else out
    print("\n=============================", file=out)
    print(f"Analyzing Language: {report.language}", file=out)
    print("=============================", file=out)
    print("\nAnalyzing encrypted text:", file=out)
    print(report.text, file=out)

    print("\n=== Frequency Analysis ===", file=out)
    for letter, count in sorted_frequencies(report.frequencies):
        print(f"{letter}: {count}", file=out)

    for res in report.results:
        print(f"\n=== {TITLES[res.technique]} Analysis ===", file=out)
        if res.technique == CAESAR:
            print(f"Best Caesar Shift: {res.params}", file=out)
            print(f"Decrypted Text with Best Shift: {res.text}", file=out)
        elif res.technique == VIGENERE:
            print(f"Keyword: {res.params} | Valid Words: {res.valid_words}", file=out)
            print(f"Decrypted Text: {res.text}", file=out)
        elif res.technique == TRANSPOSITION:
            print(f"Reversed Text: {res.text} | Valid Words: {res.valid_words}", file=out)
        else:
            print(f"Valid Words: {res.valid_words}", file=out)
            print(f"Decrypted Text: {res.text}", file=out)
        print(f"Matched Words: {_matched(res.matched)}", file=out)

    print(f"\n=== Dictionary-Based Analysis for {report.language} ===", file=out)
    print(f"Valid Words: {report.baseline.valid_words}", file=out)
    print(f"Matched Words: {_matched(report.baseline.matched)}", file=out)


def print_run(run: RunResult, out=None) -> None:
    out = sys.stdout if out is None else out
    print("Welcome to the Voynich Cipher Analyzer!", file=out)
    for report in run.reports:
        print_language_report(report, out=out)

    print("\n=== Summary ===", file=out)
    for diag in run.diagnostics:
        print(f"[{diag.kind}] {diag.language}: {diag.message}", file=out)
    winner = run.best()
    if winner is None:
        print("No language could be analyzed.", file=out)
    elif winner[1].valid_words == 0:
        print("No technique matched any dictionary word.", file=out)
    else:
        language, res = winner
        params = f" ({res.params})" if res.params else ""
        print(f"Best result: {language} / {TITLES[res.technique]}{params} "
              f"with {res.valid_words} valid words", file=out)


def run_to_dict(run: RunResult) -> dict:
    return {
        "reports": [
            {
                "language": report.language,
                "text": report.text,
                "frequencies": [[letter, count] for letter, count in sorted_frequencies(report.frequencies)],
                "baseline": report.baseline.to_dict(),
                "results": [res.to_dict() for res in report.results],
            }
            for report in run.reports
        ],
        "diagnostics": [
            {"language": d.language, "kind": d.kind, "message": d.message}
            for d in run.diagnostics
        ],
    }


def write_json(run: RunResult, path) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(run_to_dict(run), f, ensure_ascii=False, indent=2)
