from typing import Iterable

from src.service.cinema.domain.value_object.seat_layout_policy import SeatLayoutPolicy


def calculate_available_seats(
    *,
    capacity: int,
    committed_seats: Iterable[str],
    layout_policy: SeatLayoutPolicy,
) -> list[str]:
    """Seats of the full layout that no reservation holds, in layout order."""
    committed = set(committed_seats)
    return [seat for seat in layout_policy.generate(capacity) if seat not in committed]


def find_seat_conflicts(
    *, requested_seats: Iterable[str], committed_seats: Iterable[str]
) -> set[str]:
    return set(requested_seats) & set(committed_seats)
