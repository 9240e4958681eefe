from v3poolmath.constants import Q128
from v3poolmath.tokens_owed import get_tokens_owed


def test_get_tokens_owed():
    assert get_tokens_owed(0, 0, 1, Q128, Q128) == (1, 1)


def test_no_growth_owes_nothing():
    assert get_tokens_owed(Q128, Q128, 10**18, Q128, Q128) == (0, 0)


def test_growth_wraps_around():
    last = (1 << 256) - Q128
    assert get_tokens_owed(last, last, 1, 0, 0) == (1, 1)