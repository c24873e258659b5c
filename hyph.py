# Hyphenates a text file (or stdin) word by word with a set of patterns.

import argparse
import logging
import sys

from pattern_loader import (
    HyphenationLoadError,
    hyphenator_for_language,
    load_patterns_from_file,
    load_patterns_from_tex,
)


def load_hyphenator(args):
    if args.lang:
        return hyphenator_for_language(args.patterns)
    if args.tex:
        return load_patterns_from_tex(args.patterns)
    return load_patterns_from_file(args.patterns)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Hyphenate text with TeX-style patterns')
    parser.add_argument('patterns', type=str, help='pattern file, or a language tag with --lang')
    parser.add_argument('text_file', type=str, nargs='?', help='text to hyphenate, stdin if omitted')
    parser.add_argument('--tex', action='store_true', help='patterns are a TeX \\patterns{} file')
    parser.add_argument('--lang', action='store_true',
                        help='look the patterns up by language tag in $HYPH_PATTERNS_PATH')
    parser.add_argument('--hyphen', type=str, default='-', help='hyphen to insert')
    parser.add_argument('-v', action='store_true', help='verbose')
    args = parser.parse_args(argv)

    if args.v:
        logging.basicConfig(level=logging.DEBUG)

    try:
        hyphenator = load_hyphenator(args)
    except HyphenationLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.text_file:
        try:
            with open(args.text_file, 'r', encoding='utf-8') as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        lines = sys.stdin
    for line in lines:
        print(hyphenator.hyphenate_text(line.rstrip('\n'), args.hyphen))


if __name__ == '__main__':
    main()
