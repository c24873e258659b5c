# Builds a Hyphenator from a pattern file.
#
# The plain format is whitespace separated tokens. Up to two leading tokens
# made only of digits set the safe zone at the start and at the end of a word;
# everything else is a pattern, e.g.
#
#   1 1
#   hy3ph schif1fahrt/ff=f,5,2

import logging
import os
import regex
from typing import IO, Optional, Union

from hyphenation_rule import compile_rule
from hyphenator import Hyphenator
from pattern_trie import PatternTrie

logger = logging.getLogger(__name__)

PATTERNS_PATH_ENV = 'HYPH_PATTERNS_PATH'
DEFAULT_PATTERNS_DIR = '/usr/local/share/hyph-patterns'

TOKEN_SEPARATORS = regex.compile(r'[ \t\n\r]+')
MARGIN = regex.compile(r'[0-9]+')
TEX_COMMENT = regex.compile(r'(?<!\\)%.*$', regex.MULTILINE)
TEX_PATTERNS = regex.compile(r'\\patterns\s*\{([^}]*)\}')
SUBTAG_SEPARATOR = regex.compile(r'[-_]')


class HyphenationLoadError(Exception):
    pass


def _read(stream: IO) -> str:
    try:
        data = stream.read()
        if isinstance(data, bytes):
            data = data.decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise HyphenationLoadError(f"cannot read hyphenation patterns: {e}") from e
    return data


def build_from_tokens(tokens, start_safe: int = 1, end_safe: int = 1, parse_margins: bool = True) -> Hyphenator:
    trie = PatternTrie()
    margins = 0
    for token in tokens:
        if not token:
            continue
        if parse_margins and margins < 2 and MARGIN.fullmatch(token):
            if margins == 0:
                start_safe = int(token)
            else:
                end_safe = int(token)
            margins += 1
            continue
        # Numbers after the first pattern are patterns too
        parse_margins = False
        trie.insert(compile_rule(token))

    hyphenator = Hyphenator(trie, start_safe, end_safe)
    logger.debug("loaded %s", hyphenator)
    return hyphenator


def load_patterns(stream: IO) -> Hyphenator:
    """Build a Hyphenator from a text or UTF-8 byte stream in the plain pattern format."""
    return build_from_tokens(TOKEN_SEPARATORS.split(_read(stream)))


def load_patterns_from_file(filename: Union[str, os.PathLike]) -> Hyphenator:
    try:
        with open(filename, 'rb') as f:
            hyphenator = load_patterns(f)
    except OSError as e:
        raise HyphenationLoadError(f"cannot open hyphenation patterns {filename}: {e}") from e
    logger.info("loaded %d patterns from %s", len(hyphenator.trie), filename)
    return hyphenator


def load_patterns_from_tex(tex_file: Union[str, os.PathLike], start_safe: int = 2, end_safe: int = 2) -> Hyphenator:
    """Build a Hyphenator from the \\patterns{...} blocks of a TeX pattern file.

    TeX files carry no safe zones, so they are passed in. \\hyphenation{...}
    exception lists are ignored.
    """
    try:
        with open(tex_file, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise HyphenationLoadError(f"cannot read TeX patterns {tex_file}: {e}") from e

    text = TEX_COMMENT.sub('', text)
    tokens = []
    for block in TEX_PATTERNS.findall(text):
        tokens.extend(TOKEN_SEPARATORS.split(block))
    hyphenator = build_from_tokens(tokens, start_safe, end_safe, parse_margins=False)
    logger.info("loaded %d patterns from %s", len(hyphenator.trie), tex_file)
    return hyphenator


def find_pattern_file(lang: str, search_path: Optional[str] = None) -> str:
    """Find the pattern file for a language tag like 'de-DE-1996'.

    Files are looked up by the full tag, then by ever shorter prefixes ('de-DE', 'de').
    """
    if not search_path:
        search_path = os.environ.get(PATTERNS_PATH_ENV) or DEFAULT_PATTERNS_DIR

    candidate = lang
    while candidate:
        filename = os.path.join(search_path, candidate)
        if os.path.isfile(filename):
            return filename
        separators = list(SUBTAG_SEPARATOR.finditer(candidate))
        candidate = candidate[:separators[-1].start()] if separators else ''
    raise HyphenationLoadError(f"no hyphenation patterns for {lang!r} in {search_path}")


def hyphenator_for_language(lang: str, search_path: Optional[str] = None) -> Hyphenator:
    return load_patterns_from_file(find_pattern_file(lang, search_path))
