import pytest

from ellers.config import MazeConfig
from ellers.errors import InvalidArgument

def test_from_strings_parses_decimal():
    cfg = MazeConfig.from_strings(" 8 ", "12", "7")
    assert (cfg.width, cfg.iterations, cfg.seed) == (8, 12, 7)
    assert cfg.label_digits == 2  # 96

@pytest.mark.parametrize("width,iterations", [
    ("abc", "3"), ("3", "x"), ("-1", "3"), ("5.0", "3"), ("", "3"),
    ("0", "3"), ("3", "1"), ("3", "0"),
])
def test_rejects_bad_strings(width, iterations):
    with pytest.raises(InvalidArgument):
        MazeConfig.from_strings(width, iterations)

def test_rejects_non_int_values():
    with pytest.raises(InvalidArgument):
        MazeConfig(width=True, iterations=3)
    with pytest.raises(InvalidArgument):
        MazeConfig(width=3.0, iterations=3)
    with pytest.raises(InvalidArgument):
        MazeConfig(width=3, iterations=3, seed="1")

def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        MazeConfig(width=1, iterations=1)
