import pytest

from src.platform.content_store.in_memory_client import InMemoryContentStoreClient
from src.platform.exception.exceptions import DomainError, RevisionConflictError
from src.service.ticketing.driven_adapter.repo.match_inventory_command_repo_impl import (
    MatchInventoryCommandRepoImpl,
)
from test.constants import MATCH_ID


@pytest.fixture
def inventory_repo(content_store: InMemoryContentStoreClient) -> MatchInventoryCommandRepoImpl:
    return MatchInventoryCommandRepoImpl(content_store=content_store)


@pytest.mark.unit
class TestMatchInventoryCommandRepo:
    async def test_decrement_availability__writes_new_count(
        self,
        inventory_repo: MatchInventoryCommandRepoImpl,
        content_store: InMemoryContentStoreClient,
    ) -> None:
        match = await inventory_repo.get_for_update(match_id=MATCH_ID)

        updated = await inventory_repo.decrement_availability(match=match, quantity=2)

        assert updated.ticket_availability == 3
        assert updated.revision != match.revision
        assert content_store.documents[MATCH_ID]['ticketAvailability'] == 3

    async def test_decrement_availability__stale_read_is_rejected(
        self,
        inventory_repo: MatchInventoryCommandRepoImpl,
        content_store: InMemoryContentStoreClient,
    ) -> None:
        stale = await inventory_repo.get_for_update(match_id=MATCH_ID)
        fresh = await inventory_repo.get_for_update(match_id=MATCH_ID)
        await inventory_repo.decrement_availability(match=fresh, quantity=4)

        with pytest.raises(RevisionConflictError):
            await inventory_repo.decrement_availability(match=stale, quantity=2)

        assert content_store.documents[MATCH_ID]['ticketAvailability'] == 1

    async def test_decrement_availability__more_than_available(
        self,
        inventory_repo: MatchInventoryCommandRepoImpl,
        content_store: InMemoryContentStoreClient,
    ) -> None:
        match = await inventory_repo.get_for_update(match_id=MATCH_ID)

        with pytest.raises(DomainError, match='Only 5 ticket\\(s\\) available'):
            await inventory_repo.decrement_availability(match=match, quantity=6)

        assert content_store.documents[MATCH_ID]['ticketAvailability'] == 5

    async def test_restore_availability__gives_tickets_back(
        self,
        inventory_repo: MatchInventoryCommandRepoImpl,
        content_store: InMemoryContentStoreClient,
    ) -> None:
        await inventory_repo.restore_availability(match_id=MATCH_ID, quantity=2)

        assert content_store.documents[MATCH_ID]['ticketAvailability'] == 7
