"""
Seat layout

A showtime's seats are not stored; they are derived from its capacity.
Seats fill row-major: A1..A{n}, then B1..B{n}, over a fixed row alphabet.
"""

from typing import Iterable

import attrs


DEFAULT_ROW_LETTERS = 'ABCDEFGHIJ'
DEFAULT_COLUMNS_PER_ROW = 20


def _validate_row_letters(instance: 'SeatLayoutPolicy', attribute: attrs.Attribute, value: str):
    if not value:
        raise ValueError('row_letters must not be empty')
    if len(set(value)) != len(value):
        raise ValueError('row_letters must not repeat')


def generate_seat_layout(
    capacity: int,
    *,
    row_letters: str = DEFAULT_ROW_LETTERS,
    columns_per_row: int = DEFAULT_COLUMNS_PER_ROW,
) -> list[str]:
    """
    Ordered seat labels for a showtime of the given capacity.

    Capacity beyond len(row_letters) * columns_per_row is clamped;
    negative capacity means no seats.
    """
    max_seats = len(row_letters) * max(columns_per_row, 0)
    seat_count = min(max(capacity, 0), max_seats)
    return [
        f'{row_letters[index // columns_per_row]}{index % columns_per_row + 1}'
        for index in range(seat_count)
    ]


@attrs.frozen
class SeatLayoutPolicy:
    row_letters: str = attrs.field(default=DEFAULT_ROW_LETTERS, validator=_validate_row_letters)
    columns_per_row: int = attrs.field(
        default=DEFAULT_COLUMNS_PER_ROW, validator=attrs.validators.gt(0)
    )

    @property
    def max_seats(self) -> int:
        return len(self.row_letters) * self.columns_per_row

    def generate(self, capacity: int) -> list[str]:
        return generate_seat_layout(
            capacity, row_letters=self.row_letters, columns_per_row=self.columns_per_row
        )

    def unknown_seats(self, *, capacity: int, seats: Iterable[str]) -> list[str]:
        layout = set(self.generate(capacity))
        return [seat for seat in seats if seat not in layout]
