"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.inventory_claim import InventoryClaim

__all__ = ['InventoryClaim']
