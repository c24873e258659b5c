# Carries the hyphen points of one spelling over to another one, e.g. a
# non-standard break 'schiff-fahrt' onto the spelling 'schifffahrt'.

from itertools import combinations
from typing import List

from Levenshtein import distance


def get_hyphen_points(hyphenated: str, hyphen: str = '-') -> List[int]:
    """Indices into the unhyphenated word before which a hyphen stands."""
    points = []
    offset = 0
    for i, char in enumerate(hyphenated):
        if char == hyphen:
            points.append(i - offset)
            offset += 1
    return points


def insert_hyphens(word: str, positions, hyphen: str = '-') -> str:
    result = list(word)
    for pos in sorted(positions, reverse=True):
        result.insert(pos, hyphen)
    return ''.join(result)


def transform(hyphenated: str, target: str, hyphen: str = '-') -> str:
    """Put as many hyphens into target as hyphenated has, keeping them where hyphenated has them."""
    if hyphenated.replace(hyphen, '') == target:
        return hyphenated
    num_hyphens = hyphenated.count(hyphen)
    possible_positions = range(1, len(target))
    best_result = target
    min_distance = float('inf')

    for hyphen_positions in combinations(possible_positions, num_hyphens):
        candidate = insert_hyphens(target, hyphen_positions, hyphen)
        current_distance = distance(hyphenated, candidate)

        if current_distance < min_distance:
            min_distance = current_distance
            best_result = candidate

    return best_result
