import attrs


@attrs.frozen
class BookingPolicy:
    """Booking settings handed to the use case instead of reading globals."""

    write_enabled: bool  # a write-capable CMS token is configured
    max_claim_attempts: int = 5

    def __attrs_post_init__(self) -> None:
        if self.max_claim_attempts < 1:
            raise ValueError('max_claim_attempts must be at least 1')
