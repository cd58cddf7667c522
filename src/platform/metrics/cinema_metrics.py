from prometheus_client import Counter, Histogram


class CinemaMetrics:
    """
    Cinema Reservation Service Metrics Collector

    HTTP traffic per route plus reservation ledger outcomes
    """

    def __init__(self):
        # ========== HTTP Metrics ==========
        self.http_requests = Counter(
            'http_requests_total',
            'Total number of HTTP requests',
            ['method', 'path'],
        )

        # ========== Reservation Ledger Metrics ==========
        self.reservation_operations = Counter(
            'cinema_reservation_operations_total',
            'Reservation ledger operations',
            ['operation', 'result'],  # operation: book/cancel, result: success/<error class>
        )

        self.reservation_operation_duration = Histogram(
            'cinema_reservation_operation_duration_seconds',
            'Reservation ledger operation duration',
            ['operation'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0, 10.0],
        )

        self.seats_booked = Counter(
            'cinema_seats_booked_total',
            'Seats booked through successful reservations',
        )

    # ========== Helper Methods ==========

    def record_http_request(self, *, method: str, path: str):
        self.http_requests.labels(method=method, path=path).inc()

    def record_reservation_operation(
        self, *, operation: str, result: str, duration: float, seat_count: int = 0
    ):
        self.reservation_operations.labels(operation=operation, result=result).inc()
        self.reservation_operation_duration.labels(operation=operation).observe(duration)
        if operation == 'book' and result == 'success':
            self.seats_booked.inc(seat_count)


# Global metrics instance
metrics = CinemaMetrics()
