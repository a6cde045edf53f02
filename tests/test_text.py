import copy

import pytest

from judgekit.text import check_parity, convert_quotes

SAMPLE = [
    [1, 0, 1, 0],
    [0, 0, 0, 0],
    [1, 1, 1, 1],
    [0, 1, 0, 1],
]


def test_convert_quotes_sample():
    text = '"To be or not to be," quoth the Bard, "that is the question".'
    expected = "``To be or not to be,'' quoth the Bard, ``that is the question''."
    assert convert_quotes(text) == expected


def test_convert_quotes_without_quotes_is_unchanged():
    text = "nothing to see here\nat all"
    assert convert_quotes(text) == text


def test_convert_quotes_alternates():
    result = convert_quotes('"a" "b" "c')
    assert '"' not in result
    assert result.count("``") == 3
    assert result.count("''") == 2
    assert result.index("``") < result.index("''")


def test_check_parity_ok():
    assert check_parity(SAMPLE) == "OK"


@pytest.mark.parametrize("row,col", [(0, 0), (1, 2), (3, 3), (2, 1)])
def test_check_parity_single_flip(row, col):
    matrix = copy.deepcopy(SAMPLE)
    matrix[row][col] ^= 1
    assert check_parity(matrix) == f"Change bit ({row + 1},{col + 1})"


def test_check_parity_corrupt():
    matrix = copy.deepcopy(SAMPLE)
    matrix[0][0] ^= 1
    matrix[2][3] ^= 1
    assert check_parity(matrix) == "Corrupt"


def test_check_parity_two_flips_in_same_row_is_corrupt():
    matrix = copy.deepcopy(SAMPLE)
    matrix[1][0] ^= 1
    matrix[1][2] ^= 1
    assert check_parity(matrix) == "Corrupt"