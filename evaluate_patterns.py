# Scores hyphenation patterns against a hyphenated word list (.wlh).
#
# Each line holds one hyphenated word, 'ne-boj-sa'. For non-standard breaks
# the word to hyphenate can be given first, separated by a tab:
# 'schiffahrt\tschiff-fahrt'.

import argparse
import logging
import sys
from typing import Iterable, Tuple

from hyphenator import Hyphenator
from pattern_loader import HyphenationLoadError, load_patterns_from_file, load_patterns_from_tex
from transform_hyphens import get_hyphen_points, transform

logger = logging.getLogger(__name__)


def score_word(hyphenator: Hyphenator, word: str, expected: str) -> Tuple[int, int, int]:
    predicted = '-'.join(hyphenator.hyphenate_word(word))
    target = expected.replace('-', '')
    if predicted.replace('-', '') != target:
        # A non-standard break changed the spelling
        predicted = transform(predicted, target)
    predicted_points = set(get_hyphen_points(predicted))
    expected_points = set(get_hyphen_points(expected))
    good = len(predicted_points & expected_points)
    bad = len(predicted_points - expected_points)
    missed = len(expected_points - predicted_points)
    return good, bad, missed


def evaluate(hyphenator: Hyphenator, lines: Iterable[str]) -> Tuple[int, int, int]:
    good = bad = missed = 0
    for line in lines:
        line = line.strip()
        if not line or line.startswith('%'):
            continue
        if '\t' in line:
            word, expected = line.split('\t', 1)
        else:
            word, expected = line.replace('-', ''), line
        if '-' in word:
            # The word has a hyphen of its own, which looks the same as a break
            logger.debug("skipping %s", word)
            continue
        g, b, m = score_word(hyphenator, word, expected.strip())
        if b or m:
            logger.debug("%s: expected %s, got %s", word, expected, '-'.join(hyphenator.hyphenate_word(word)))
        good += g
        bad += b
        missed += m
    return good, bad, missed


def evaluate_file(hyphenator: Hyphenator, wlh: str) -> Tuple[int, int, int]:
    with open(wlh, 'r', encoding='utf-8') as f:
        return evaluate(hyphenator, f)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Score hyphenation patterns against a hyphenated word list')
    parser.add_argument('patterns', type=str, help='pattern file')
    parser.add_argument('wlh', type=str, help='hyphenated word list, one word per line')
    parser.add_argument('--tex', action='store_true', help='patterns are a TeX \\patterns{} file')
    parser.add_argument('-v', action='store_true', help='verbose')
    args = parser.parse_args(argv)

    if args.v:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.tex:
            hyphenator = load_patterns_from_tex(args.patterns)
        else:
            hyphenator = load_patterns_from_file(args.patterns)
        good, bad, missed = evaluate_file(hyphenator, args.wlh)
    except (HyphenationLoadError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"{good} good, {bad} bad, {missed} missed")
    total = good + missed
    if total:
        print(f"{100 * good / total:.2f} % found, {100 * bad / total:.2f} % wrong")


if __name__ == '__main__':
    main()
