import doctest

import pytest

from conllio import reader, sentence, stats, token, treeutils, writer


@pytest.mark.parametrize(
    "module", [reader, sentence, stats, token, treeutils, writer]
)
def test_doctests(module):
    failures, _ = doctest.testmod(
        module, optionflags=doctest.ELLIPSIS | doctest.NORMALIZE_WHITESPACE
    )
    assert failures == 0
