import pytest

from naiveregex import DFAModel, NFAModel


@pytest.fixture
def abc_dfa() -> DFAModel[int, str]:
    """Return a DFA for ``a*bc*``."""
    return DFAModel(1, {2}, [(1, 'a', 1), (1, 'b', 2), (2, 'c', 2)])


@pytest.fixture
def third_from_last_nfa() -> NFAModel[int, str]:
    """Return an NFA for strings over {a, b} whose third symbol
       from the end is ``b``."""
    return NFAModel(1, {4}, [
        (1, 'a', 1), (1, 'b', 1), (1, 'b', 2),
        (2, 'a', 3), (2, 'b', 3),
        (3, 'a', 4), (3, 'b', 4),
    ])


@pytest.fixture
def multiples_nfa() -> NFAModel[int, str]:
    """Return an NFA for strings of ``a`` whose length is a multiple
       of two or three."""
    return NFAModel(1, {2, 4}, [
        (1, None, 2), (1, None, 4),
        (2, 'a', 3), (3, 'a', 2),
        (4, 'a', 5), (5, 'a', 6), (6, 'a', 4),
    ])
