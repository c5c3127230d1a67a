import pytest

from radix_sort import get_digit, num_digits


class TestNumDigits:
    @pytest.mark.parametrize(
        "value, expected",
        [(0, 1), (9, 1), (10, 2), (99, 2), (999, 3), (1000, 4), (10**18, 19)],
    )
    def test_counts(self, value, expected):
        assert num_digits(value) == expected

    def test_sign_is_ignored(self):
        assert num_digits(-7) == 1
        assert num_digits(-1000) == 4


class TestGetDigit:
    @pytest.mark.parametrize("position, expected", [(0, 4), (1, 3), (2, 2), (3, 1), (4, 0)])
    def test_digits_of_1234(self, position, expected):
        assert get_digit(1234, position) == expected

    def test_uses_magnitude_of_negative_values(self):
        assert [get_digit(-802, p) for p in range(3)] == [2, 0, 8]

    def test_zero(self):
        assert get_digit(0, 0) == 0

    def test_negative_position_rejected(self):
        with pytest.raises(ValueError):
            get_digit(5, -1)
