import pytest

from src.service.cinema.domain.value_object.seat_layout_policy import (
    SeatLayoutPolicy,
    generate_seat_layout,
)


pytestmark = pytest.mark.unit


class TestGenerateSeatLayout:
    def test_capacity_four_fills_first_row(self):
        assert generate_seat_layout(4) == ['A1', 'A2', 'A3', 'A4']

    def test_layout_wraps_to_next_row(self):
        layout = generate_seat_layout(5, row_letters='AB', columns_per_row=2)
        assert layout == ['A1', 'A2', 'B1', 'B2']

    def test_small_rows_fill_row_major(self):
        layout = generate_seat_layout(4, row_letters='ABC', columns_per_row=2)
        assert layout == ['A1', 'A2', 'B1', 'B2']

    def test_zero_capacity_has_no_seats(self):
        assert generate_seat_layout(0) == []

    def test_negative_capacity_has_no_seats(self):
        assert generate_seat_layout(-3) == []

    def test_capacity_beyond_grid_is_clamped(self):
        layout = generate_seat_layout(1000)
        assert len(layout) == 200
        assert layout[-1] == 'J20'

    def test_labels_are_unique_and_deterministic(self):
        first = generate_seat_layout(150)
        second = generate_seat_layout(150)
        assert first == second
        assert len(set(first)) == len(first) == 150
        assert first[20] == 'B1'


class TestSeatLayoutPolicy:
    def test_max_seats(self):
        assert SeatLayoutPolicy(row_letters='AB', columns_per_row=3).max_seats == 6

    def test_unknown_seats_reports_labels_outside_layout(self):
        policy = SeatLayoutPolicy()
        assert policy.unknown_seats(capacity=4, seats=['A1', 'A5', 'Z1']) == ['A5', 'Z1']

    def test_unknown_seats_empty_when_all_exist(self):
        policy = SeatLayoutPolicy()
        assert policy.unknown_seats(capacity=4, seats=['A4', 'A1']) == []

    def test_rejects_empty_row_letters(self):
        with pytest.raises(ValueError):
            SeatLayoutPolicy(row_letters='')

    def test_rejects_repeated_row_letters(self):
        with pytest.raises(ValueError):
            SeatLayoutPolicy(row_letters='AAB')

    def test_rejects_non_positive_columns(self):
        with pytest.raises(ValueError):
            SeatLayoutPolicy(columns_per_row=0)
