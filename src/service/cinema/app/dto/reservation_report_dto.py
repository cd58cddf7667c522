import attrs


@attrs.frozen
class MovieReservationSummary:
    movie_id: int
    title: str
    reservation_count: int
    total_seats: int


@attrs.frozen
class RevenueReport:
    total_seats: int
    total_revenue: int
    revenue_per_movie: dict[str, int]
