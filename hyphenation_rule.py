# A single hyphenation pattern, compiled from its textual form like 'a1bc3d4'
# or, for non-standard hyphenation, 'schif1fahrt/ff=f,5,2'.

import regex
from typing import Optional, Tuple

DIGITS = '0123456789'
NUMBER = regex.compile(r'[0-9]+')


class HyphenationRule:
    """A pattern with one priority per gap around its letters.

    An odd priority allows a hyphen before the letter at that offset, an even
    one forbids it. Only the highest priority seen for a gap counts.
    """

    def __init__(self, key: str, priorities: Tuple[int, ...], del_pre: int = 0, skip_post: int = 0,
                 insert_pre: Optional[str] = None, insert_post: Optional[str] = None):
        self.key = key
        self.priorities = tuple(priorities)
        self.del_pre = del_pre
        self.skip_post = skip_post
        self.insert_pre = insert_pre
        self.insert_post = insert_post

    def has_priority(self, offset: int) -> bool:
        return 0 <= offset < len(self.priorities)

    def priority(self, offset: int) -> int:
        """Priority of a hyphen preceding the letter at offset. Check has_priority first."""
        assert self.has_priority(offset), f"no priority at offset {offset} of {self.key!r}"
        return self.priorities[offset]

    def space_needed_pre_hyphen(self) -> int:
        # 0 for standard hyphenation, 1 for Schiff-fahrt
        return len(self.insert_pre or '') - self.del_pre

    def is_non_standard(self) -> bool:
        return bool(self.del_pre or self.skip_post or self.insert_pre is not None
                    or self.insert_post is not None)

    def apply_first(self, head: str, hyphen: str = '-') -> str:
        """Text up to and including the hyphen, head being the text before the break."""
        if self.del_pre:
            head = head[:-self.del_pre]
        return head + (self.insert_pre or '') + hyphen

    def apply_second(self, tail: str) -> str:
        """Text after the hyphen, tail being the text after the break."""
        return (self.insert_post or '') + tail[self.skip_post:]

    def apply(self, head: str, tail: str, hyphen: str = '-') -> Tuple[str, str]:
        return self.apply_first(head, hyphen), self.apply_second(tail)

    def __repr__(self):
        if self.is_non_standard():
            return (f"HyphenationRule({self.key!r}, {self.priorities}, del_pre={self.del_pre}, "
                    f"skip_post={self.skip_post}, insert_pre={self.insert_pre!r}, "
                    f"insert_post={self.insert_post!r})")
        return f"HyphenationRule({self.key!r}, {self.priorities})"


def _parse_number(text: str) -> int:
    # Anything that is not a plain decimal number counts as 0
    return int(text) if NUMBER.fullmatch(text) else 0


def compile_rule(token: str) -> HyphenationRule:
    """Compile one whitespace-free pattern token. Never raises."""
    key = []
    priorities = []
    priority = 0

    i = 0
    while i < len(token) and token[i] != '/':
        c = token[i]
        if c in DIGITS:
            priority = 10 * priority + int(c)
        else:
            key.append(c)
            priorities.append(priority)
            priority = 0
        i += 1

    priorities.append(priority)
    while len(priorities) > 1 and priorities[-1] == 0:
        priorities.pop()

    del_pre = skip_post = 0
    insert_pre = insert_post = None
    if i < len(token):
        # Non-standard hyphenation: insert_pre=insert_post,start,cut
        fields = ['']
        for c in token[i + 1:]:
            if len(fields) == 1 and c == '=':
                fields.append('')
            elif len(fields) in (2, 3) and c == ',':
                fields.append('')
            elif len(fields) == 4 and c not in DIGITS:
                break
            else:
                fields[-1] += c

        insert_pre = fields[0] or None
        if len(fields) > 1:
            insert_post = fields[1] or None
        start = _parse_number(fields[2]) if len(fields) > 2 else 0
        if len(fields) > 3:
            cut = _parse_number(fields[3])
        else:
            cut = max(len(key) - start, 0)
        if len(fields) < 3:
            start = 1

        skip_post = cut
        for position in range(max(start, 1), start + cut):
            if position >= len(priorities) or priorities[position - 1] % 2 == 1:
                break
            del_pre += 1
            skip_post -= 1

    return HyphenationRule(''.join(key), tuple(priorities), del_pre, skip_post, insert_pre, insert_post)
