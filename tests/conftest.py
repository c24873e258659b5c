import io

import pytest

from pattern_loader import load_patterns

# The patterns Knuth uses to hyphenate 'hyphenation' in The TeXbook, appendix H
HYPHENATION_PATTERNS = """2 3
hy3ph he2n hena4 hen5at 1na n2at 1tio 2io o2n
"""

SCHIFFAHRT_PATTERNS = "1 1 schif1fahrt/ff=f,5,2"


@pytest.fixture
def hyphenator():
    return load_patterns(io.StringIO(HYPHENATION_PATTERNS))


@pytest.fixture
def schiffahrt():
    return load_patterns(io.StringIO(SCHIFFAHRT_PATTERNS))


@pytest.fixture
def every_letter():
    # A hyphen is allowed before every letter from a to j
    return load_patterns(io.StringIO("1 1 " + " ".join("1" + c for c in "abcdefghij")))
