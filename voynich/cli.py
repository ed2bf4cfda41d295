#!/usr/bin/env python3
"""Voynich Cipher Analyzer command line.

Usage examples:
  voynich-analyzer
  voynich-analyzer --dictionary-dir ./dictionary --languages latin,italian
  voynich-analyzer --config analyzer.json --json report.json --plot freq.png

Every option is optional: with none given the built-in ciphertext is
analyzed against each configured language's word list. Missing word lists
are reported and skipped.
"""

import argparse
import logging
import sys

from .analyzer import Analyzer
from .config import load_config
from .errors import ConfigError
from .frequency import count_frequencies, plot_frequencies
from .report import print_run, write_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voynich-analyzer",
        description="Classical cryptanalysis of a Voynich-style ciphertext")
    parser.add_argument("--config", help="JSON file overriding the default configuration")
    parser.add_argument("--dictionary-dir", help="Directory holding <language>_dictionary.txt files")
    parser.add_argument("--languages", help="Comma separated list of languages to analyze")
    parser.add_argument("--ciphertext", help="Ciphertext to analyze instead of the built-in snippet")
    parser.add_argument("--keyword", help="Vigenere keyword (default VOYNICH)")
    parser.add_argument("--workers", type=int, help="Processes used for the Caesar brute force")
    parser.add_argument("--json", dest="json_path", help="Also write the report as JSON to this file")
    parser.add_argument("--plot", dest="plot_path", help="Save a letter frequency bar chart to this file")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config).override(
            dictionary_dir=args.dictionary_dir,
            languages=args.languages,
            ciphertext=args.ciphertext,
            poly_keyword=args.keyword,
            workers=args.workers,
        )
    except ConfigError as e:
        parser.error(str(e))

    run = Analyzer(config).run()
    print_run(run)

    if args.json_path:
        write_json(run, args.json_path)
        logger.info("Report written to %s", args.json_path)
    if args.plot_path:
        plot_frequencies(count_frequencies(config.prepared_text()), args.plot_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
