#!/usr/bin/env python3
"""
porterstem CLI

Usage:
    porterstem stem WORD [WORD...]
    porterstem file PATH [PATH...]        (use - for stdin)
    porterstem trace WORD
    porterstem measure WORD

Global options:
    --lenient      Pass through tokens that aren't plain words instead of failing
    --keep-case    Don't lowercase input (uppercase letters are then rejected)
    -v, --verbose  Log every rule that fires (to stderr)

Defaults come from PORTERSTEM_STRICT / PORTERSTEM_LOWERCASE / PORTERSTEM_MIN_LENGTH.
"""

import argparse
import logging
import sys

from porterstem.config import StemmerConfig
from porterstem.letters import contains_vowel, cv_pattern, ends_cvc, ends_double_consonant, measure
from porterstem.stemmer import PorterStemmer
from porterstem.validation import InvalidWordError, validate_word

logger = logging.getLogger(__name__)


def get_stemmer(args) -> PorterStemmer:
    """Build a stemmer from the environment, overridden by CLI flags."""
    config = StemmerConfig.from_env()
    if args.lenient:
        config.strict = False
    if args.keep_case:
        config.lowercase = False
    return PorterStemmer(config)


def cmd_stem(args, stemmer: PorterStemmer) -> int:
    """Stem each word given on the command line."""
    status = 0
    for word in args.words:
        try:
            print(stemmer.stem(word))
        except InvalidWordError as e:
            print(f"✗ {e}", file=sys.stderr)
            status = 1
    return status


def _stem_stream(stream, name: str, stemmer: PorterStemmer) -> int:
    status = 0
    for lineno, line in enumerate(stream, 1):
        out = []
        for token in line.split():
            try:
                out.append(stemmer.stem(token))
            except InvalidWordError as e:
                print(f"✗ {name}:{lineno}: {e}", file=sys.stderr)
                out.append(token)
                status = 1
        print(" ".join(out))
    return status


def cmd_file(args, stemmer: PorterStemmer) -> int:
    """Stem whitespace-separated tokens from files, keeping line structure."""
    status = 0
    for path in args.paths:
        logger.debug("Stemming tokens from %s", path)
        if path == "-":
            status |= _stem_stream(sys.stdin, "<stdin>", stemmer)
            continue
        try:
            with open(path, encoding="utf-8") as f:
                status |= _stem_stream(f, path, stemmer)
        except OSError as e:
            print(f"✗ {path}: {e.strerror}", file=sys.stderr)
            status = 1
    return status


def cmd_trace(args, stemmer: PorterStemmer) -> int:
    """Show what every step group did to a word."""
    try:
        trace = stemmer.trace(args.word)
    except InvalidWordError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    print(f"=== {trace.word} -> {trace.stem} ===\n")
    if trace.skipped:
        print(f"  (not stemmed: {trace.skipped})")
        return 0

    for step in trace.steps:
        if step.changed:
            rules = "; ".join(r.describe() for r in step.rules)
            print(f"  {step.step:>3}  {step.before:<16} → {step.after:<16} [{rules}]")
        else:
            print(f"  {step.step:>3}  {step.before:<16}   (no change)")
    return 0


def cmd_measure(args, stemmer: PorterStemmer) -> int:
    """Show the letter classification and pattern tests for a word."""
    try:
        word, ok = validate_word(args.word, stemmer.config)
    except InvalidWordError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1
    if not ok:
        print(f"✗ {word!r} is not a plain lowercase word", file=sys.stderr)
        return 1

    print(f"Word:     {word}")
    print(f"Pattern:  {cv_pattern(word)}")
    print(f"Measure:  {measure(word)}")
    print(f"*v*:      {contains_vowel(word)}")
    print(f"*d:       {ends_double_consonant(word)}")
    print(f"*o:       {ends_cvc(word)}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="porterstem",
        description="porterstem: Porter stemming for English words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--lenient", action="store_true", help="Pass through non-word tokens")
    parser.add_argument("--keep-case", action="store_true", help="Don't lowercase input")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log fired rules")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # stem
    stem_parser = subparsers.add_parser("stem", help="Stem words")
    stem_parser.add_argument("words", nargs="+", help="Words to stem")

    # file
    file_parser = subparsers.add_parser("file", help="Stem tokens from files")
    file_parser.add_argument("paths", nargs="+", help="Files to read (- for stdin)")

    # trace
    trace_parser = subparsers.add_parser("trace", help="Show each step for a word")
    trace_parser.add_argument("word", help="Word to trace")

    # measure
    measure_parser = subparsers.add_parser("measure", help="Show measure and patterns")
    measure_parser.add_argument("word", help="Word to inspect")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 1

    try:
        stemmer = get_stemmer(args)
    except ValueError as e:
        print(f"✗ Invalid configuration: {e}", file=sys.stderr)
        return 2

    commands = {
        "stem": cmd_stem,
        "file": cmd_file,
        "trace": cmd_trace,
        "measure": cmd_measure,
    }

    return commands[args.command](args, stemmer)


if __name__ == "__main__":
    sys.exit(main())
