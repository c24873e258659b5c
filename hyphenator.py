import regex
from typing import List, Optional, Tuple

from hyphenation_rule import HyphenationRule
from pattern_trie import PatternTrie, fold_case

BOUNDARY = '.'
NOT_LOWERCASE_LETTER = regex.compile(r'[^\p{Ll}]')
WHITESPACE = regex.compile(r'(\s+)')


class Hyphenator:
    """A pattern trie together with the safe zones at both ends of a word.

    start_safe and end_safe are the minimum number of letters kept together
    at the start and end of a word (and around punctuation). Build it once,
    then only query it; hyphenate() never modifies the dictionary.
    """

    def __init__(self, trie: Optional[PatternTrie] = None, start_safe: int = 1, end_safe: int = 1):
        self.trie = trie if trie is not None else PatternTrie()
        self.start_safe = start_safe
        self.end_safe = end_safe

    def hyphenate(self, word: str) -> List[Optional[HyphenationRule]]:
        """One entry per letter of word: the rule allowing a hyphen before it, or None."""
        length = len(word)
        if not length:
            return []
        key = fold_case(word)
        _, rules = self.trie.scan(BOUNDARY + key + BOUNDARY)

        # rules[i + 1] is the gap before word[i]
        output = [None] * length
        for i in range(max(self.start_safe, 0), min(length - 1, length - self.end_safe) + 1):
            output[i] = rules[i + 1]

        # Keep hyphens away from digits, apostrophes and other punctuation
        for m in NOT_LOWERCASE_LETTER.finditer(key):
            upto = min(length, m.end() + self.end_safe)
            for i in range(max(0, m.start() - self.start_safe), upto):
                output[i] = None
        return output

    def positions(self, word: str) -> List[int]:
        return [i for i, rule in enumerate(self.hyphenate(word)) if rule is not None]

    def splits(self, word: str, hyphen: str = '-') -> List[Tuple[str, str]]:
        """All the ways to break word in two, e.g. ('schiff-', 'fahrt')."""
        return [rule.apply(word[:i], word[i:], hyphen)
                for i, rule in enumerate(self.hyphenate(word)) if rule is not None]

    def hyphenate_word(self, word: str) -> List[str]:
        """Split word into pieces at every permitted break, applying any splices."""
        rules = self.hyphenate(word)
        pieces = ['']
        i = 0
        while i < len(word):
            rule = rules[i]
            if rule is not None:
                pieces[-1] = rule.apply_first(pieces[-1], '')
                pieces.append(rule.insert_post or '')
                # Letters replaced by insert_post are not printed again
                i += rule.skip_post
                if i >= len(word):
                    break
            pieces[-1] += word[i]
            i += 1
        return pieces

    def hyphenate_text(self, text: str, hyphen: str = '-') -> str:
        parts = WHITESPACE.split(text)
        return ''.join(part if not part or part.isspace() else hyphen.join(self.hyphenate_word(part))
                       for part in parts)

    def __repr__(self):
        return f"Hyphenator({len(self.trie)} patterns, start_safe={self.start_safe}, end_safe={self.end_safe})"
