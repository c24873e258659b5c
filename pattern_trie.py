from typing import List, Optional, Tuple

from hyphenation_rule import HyphenationRule


def fold_case(word: str) -> str:
    """Lower-case word without changing its length."""
    folded = word.lower()
    if len(folded) == len(word):
        return folded
    # Some characters lower-case to more than one code point, leave those alone
    return ''.join(c.lower() if len(c.lower()) == 1 else c for c in word)


class PatternTrie:
    def __init__(self):
        # Each character finds a dict another level down in the tree; the
        # rule whose key ends at a node is stored under None.
        self.tree = {}
        self.size = 0

    def insert(self, rule: HyphenationRule):
        t = self.tree
        for c in fold_case(rule.key):
            if c not in t:
                t[c] = {}
            t = t[c]
        if None not in t:
            self.size += 1
        # Identical keys: the last one wins
        t[None] = rule

    def find(self, key: str) -> Optional[HyphenationRule]:
        """The rule stored for exactly this key, for inspecting a loaded dictionary."""
        t = self.tree
        for c in fold_case(key):
            if c not in t:
                return None
            t = t[c]
        return t.get(None)

    def scan(self, work: str) -> Tuple[List[int], List[Optional[HyphenationRule]]]:
        """Merge every rule matching anywhere in work.

        Returns the winning priority and rule for each of the len(work) + 1
        gaps. A rule only replaces a strictly lower priority; an even winner
        leaves no rule behind.
        """
        points = [0] * (len(work) + 1)
        rules = [None] * (len(work) + 1)
        for i in range(len(work)):
            matched = []
            t = self.tree
            if None in t:
                matched.append(t[None])
            for c in work[i:]:
                if c not in t:
                    break
                t = t[c]
                if None in t:
                    matched.append(t[None])
            # Longer matches go first
            for rule in reversed(matched):
                for j, p in enumerate(rule.priorities):
                    if p > points[i + j]:
                        points[i + j] = p
                        rules[i + j] = rule if p % 2 else None
        return points, rules

    def __len__(self):
        return self.size
