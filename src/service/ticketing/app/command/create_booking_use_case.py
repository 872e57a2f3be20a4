import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    ConfigurationError,
    ContentStoreError,
    CustomBaseError,
    DomainError,
    NotFoundError,
    RevisionConflictError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.site_metrics import metrics
from src.service.shared_kernel.domain.html_sanitizer import sanitize_text
from src.service.shared_kernel.domain.value_object.reference_id import generate_booking_id
from src.service.ticketing.app.dto.booking_policy import BookingPolicy
from src.service.ticketing.app.dto.booking_result import BookingResult
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.app.interface.i_booking_notifier import IBookingNotifier
from src.service.ticketing.app.interface.i_match_inventory_command_repo import (
    IMatchInventoryCommandRepo,
)
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.value_object.inventory_claim import InventoryClaim


class CreateBookingUseCase:
    """
    Create booking use case

    Flow:
    1. Fail fast when no write-capable CMS token is configured
    2. Claim tickets: read match with revision -> check -> compare-and-swap decrement
       (re-read and re-check on revision conflict, bounded attempts)
    3. Create the booking document (status confirmed, sanitized name/email)
    4. Send customer + admin emails (best effort)

    Partial failures:
    - Decrement rejected for a reason other than a lost race: logged, booking still created
    - Booking write rejected after a successful claim: claimed tickets are given back
    - Email failures: reported in the result, never raised
    """

    def __init__(
        self,
        *,
        policy: BookingPolicy,
        inventory_repo: IMatchInventoryCommandRepo,
        booking_repo: IBookingCommandRepo,
        notifier: IBookingNotifier,
    ) -> None:
        self.policy = policy
        self.inventory_repo = inventory_repo
        self.booking_repo = booking_repo
        self.notifier = notifier
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        policy: BookingPolicy = Depends(Provide[Container.booking_policy]),
        inventory_repo: IMatchInventoryCommandRepo = Depends(
            Provide[Container.match_inventory_command_repo]
        ),
        booking_repo: IBookingCommandRepo = Depends(Provide[Container.booking_command_repo]),
        notifier: IBookingNotifier = Depends(Provide[Container.booking_notifier]),
    ) -> Self:
        return cls(
            policy=policy,
            inventory_repo=inventory_repo,
            booking_repo=booking_repo,
            notifier=notifier,
        )

    @Logger.io
    async def create_booking(
        self,
        *,
        match_id: str,
        name: str,
        email: str,
        quantity: int,
    ) -> BookingResult:
        """
        Args:
            match_id: CMS id of the match
            name: Purchaser name (already trimmed by request validation)
            email: Purchaser email
            quantity: Number of tickets, 1..100

        Returns:
            BookingResult with the stored booking, the inventory claim and email outcomes

        Raises:
            ConfigurationError: Missing or under-privileged CMS write token
            NotFoundError: Match does not exist
            DomainError: Ticketing disabled, not enough tickets, or the match stayed contended
        """
        started = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'match.id': match_id, 'booking.quantity': quantity},
        ) as span:
            try:
                if not self.policy.write_enabled:
                    Logger.base.error('SANITY_API_TOKEN not configured')
                    raise ConfigurationError('Server configuration error. Please contact support.')

                claim = await self._claim_tickets(match_id=match_id, quantity=quantity)
                span.set_attribute('inventory.decremented', claim.decremented)

                booking = await self._store_booking(
                    claim=claim, match_id=match_id, name=name, email=email, quantity=quantity
                )
                span.set_attribute('booking.id', booking.booking_id)
                Logger.base.info(
                    f'🎫 [CREATE-BOOKING] {booking.booking_id}: {quantity} ticket(s) for '
                    f'{claim.match.title}, {claim.remaining_availability} left'
                )

                notifications = await self.notifier.notify_booking_confirmed(
                    booking=booking,
                    match=claim.match,
                    remaining_availability=claim.remaining_availability,
                )
            except CustomBaseError:
                metrics.record_booking(result='rejected', duration=time.perf_counter() - started)
                raise
            except Exception:
                metrics.record_booking(result='error', duration=time.perf_counter() - started)
                raise

            metrics.record_booking(
                result='confirmed',
                duration=time.perf_counter() - started,
                match_id=match_id,
                quantity=quantity,
            )
            return BookingResult(booking=booking, claim=claim, notifications=notifications)

    async def _claim_tickets(self, *, match_id: str, quantity: int) -> InventoryClaim:
        for attempt in range(1, self.policy.max_claim_attempts + 1):
            match = await self.inventory_repo.get_for_update(match_id=match_id)
            if match is None:
                raise NotFoundError('Match not found')

            # Raises DomainError with the count observed by this read
            match.ensure_bookable(quantity=quantity)

            try:
                await self.inventory_repo.decrement_availability(match=match, quantity=quantity)
            except RevisionConflictError:
                metrics.record_revision_conflict()
                Logger.base.warning(
                    f'🔁 [INVENTORY] Match {match_id} changed during claim '
                    f'(attempt {attempt}/{self.policy.max_claim_attempts}), re-reading'
                )
                continue
            except ContentStoreError as e:
                # Booking is kept even though the counter was not written
                metrics.record_inventory_claim(outcome='write_failed')
                if e.is_permission_error:
                    Logger.base.warning(
                        'Could not update match availability - check SANITY_API_TOKEN permissions'
                    )
                Logger.base.error(f'Failed to update match availability for {match_id}: {e}')
                return InventoryClaim(
                    match=match,
                    quantity=quantity,
                    attempts=attempt,
                    decremented=False,
                    write_error=e.message,
                )

            metrics.record_inventory_claim(outcome='claimed')
            return InventoryClaim(match=match, quantity=quantity, attempts=attempt, decremented=True)

        metrics.record_inventory_claim(outcome='contended')
        raise DomainError('Tickets for this match are in high demand right now. Please try again.')

    async def _store_booking(
        self, *, claim: InventoryClaim, match_id: str, name: str, email: str, quantity: int
    ) -> Booking:
        booking = Booking.create(
            booking_id=generate_booking_id(),
            match_id=match_id,
            name=sanitize_text(name),
            email=sanitize_text(email),
            quantity=quantity,
        )
        try:
            return await self.booking_repo.create(booking=booking)
        except ContentStoreError as e:
            Logger.base.error(f'Failed to create booking {booking.booking_id}: {e}')
            if claim.decremented:
                await self._release_claim(claim=claim)
            if e.is_permission_error:
                raise ConfigurationError(
                    'Server configuration error. Please ensure SANITY_API_TOKEN has write permissions.'
                ) from e
            raise

    async def _release_claim(self, *, claim: InventoryClaim) -> None:
        try:
            await self.inventory_repo.restore_availability(
                match_id=claim.match.id, quantity=claim.quantity
            )
        except ContentStoreError as e:
            Logger.base.error(
                f'Failed to give back {claim.quantity} ticket(s) for match {claim.match.id}: {e}'
            )
