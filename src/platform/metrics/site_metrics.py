from prometheus_client import Counter, Histogram


class SiteMetrics:
    """
    Club Site Core Metrics Collector

    Tracks ticket bookings, inventory compare-and-swap contention,
    shop checkouts and transactional email delivery
    """

    def __init__(self):
        # ========== Ticket Booking Metrics ==========
        self.booking_requests = Counter(
            'ticket_booking_requests_total',
            'Total ticket booking requests',
            ['result'],  # result: confirmed/rejected/error
        )

        self.tickets_booked = Counter(
            'tickets_booked_total', 'Total tickets booked', ['match_id']
        )

        self.booking_duration = Histogram(
            'ticket_booking_duration_seconds',
            'Ticket booking processing time',
            buckets=[0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0, 10.0],
        )

        # ========== Inventory Metrics ==========
        self.inventory_claims = Counter(
            'inventory_claims_total',
            'Inventory decrement attempts by outcome',
            ['outcome'],  # outcome: claimed/write_failed/contended
        )

        self.inventory_revision_conflicts = Counter(
            'inventory_revision_conflicts_total',
            'Inventory patches rejected because the match revision moved on',
        )

        # ========== Shop Metrics ==========
        self.checkout_requests = Counter(
            'shop_checkout_requests_total',
            'Total shop checkout requests',
            ['result', 'currency'],
        )

        # ========== Notification Metrics ==========
        self.emails = Counter(
            'emails_total',
            'Transactional emails by kind and delivery status',
            ['kind', 'status'],  # status: sent/failed/skipped
        )

    # ========== Helper Methods ==========

    def record_booking(self, *, result: str, duration: float, match_id: str = '', quantity: int = 0):
        self.booking_requests.labels(result=result).inc()
        self.booking_duration.observe(duration)
        if quantity:
            self.tickets_booked.labels(match_id=match_id).inc(quantity)

    def record_inventory_claim(self, *, outcome: str):
        self.inventory_claims.labels(outcome=outcome).inc()

    def record_revision_conflict(self):
        self.inventory_revision_conflicts.inc()

    def record_checkout(self, *, result: str, currency: str):
        self.checkout_requests.labels(result=result, currency=currency).inc()

    def record_email(self, *, kind: str, status: str):
        self.emails.labels(kind=kind, status=status).inc()


# Global metrics instance
metrics = SiteMetrics()
