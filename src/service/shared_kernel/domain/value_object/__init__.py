"""Shared Kernel Value Objects"""

from src.service.shared_kernel.domain.value_object.reference_id import (
    generate_booking_id,
    generate_order_id,
    reference_id_pattern,
)

__all__ = ['generate_booking_id', 'generate_order_id', 'reference_id_pattern']
