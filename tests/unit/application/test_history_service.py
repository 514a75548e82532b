"""
Testes para HistoryService
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from weather_cli.application.services.history_service import HistoryService
from weather_cli.domain.entities.search_history import SearchType
from weather_cli.infrastructure.adapters.output.persistence.json_history_repository import (
    JsonHistoryRepository,
)


@pytest.fixture
def history_repository(tmp_path):
    return JsonHistoryRepository(str(tmp_path / 'history.json'), max_entries=3)


class TestHistoryService:

    @pytest.mark.asyncio
    async def test_save_and_read_back(self, history_repository, make_query_result):
        service = HistoryService(history_repository)

        assert await service.save('Madrid, ES', make_query_result())

        entries = await service.get_all()
        assert len(entries) == 1
        assert entries[0].city_name == 'Madrid'
        assert entries[0].temperature == pytest.approx(20.0)
        assert entries[0].search_type is SearchType.CITY
        assert entries[0].coordinates is not None

    @pytest.mark.asyncio
    async def test_keeps_only_latest_entries(self, history_repository, make_query_result):
        service = HistoryService(history_repository)
        for name in ('Madrid', 'Barcelona', 'Valencia', 'Sevilla'):
            await service.save(name, make_query_result(name))

        entries = await service.get_all()
        assert [e.city_name for e in entries] == ['Sevilla', 'Valencia', 'Barcelona']

    @pytest.mark.asyncio
    async def test_find_by_city_and_clear(self, history_repository, make_query_result):
        service = HistoryService(history_repository)
        await service.save('Madrid', make_query_result('Madrid'))
        await service.save('Bilbao', make_query_result('Bilbao'))

        assert [e.city_name for e in await service.find_by_city('bil')] == ['Bilbao']
        assert await service.clear_all() == 2
        assert await service.get_all() == []

    @pytest.mark.asyncio
    async def test_stats(self, history_repository, make_query_result):
        service = HistoryService(history_repository)
        await service.save('Madrid', make_query_result('Madrid', temperature=293.15))
        await service.save('Madrid', make_query_result('Madrid', temperature=303.15))

        stats = await service.get_stats()

        assert stats['total'] == 2
        assert stats['topCities'][0] == ('Madrid, ES', 2)
        assert stats['averageTemperature'] == pytest.approx(25.0)
        assert stats['byType'] == {'city': 2}

    @pytest.mark.asyncio
    async def test_failures_are_swallowed(self, make_query_result):
        """REGRA: falha de persistência nunca propaga"""
        repository = MagicMock()
        repository.is_available.return_value = True
        repository.save = AsyncMock(side_effect=OSError("disk full"))
        repository.get_all = AsyncMock(side_effect=OSError("disk full"))
        repository.clear = AsyncMock(side_effect=OSError("disk full"))
        logger = MagicMock()
        service = HistoryService(repository, logger=logger)

        assert await service.save('Madrid', make_query_result()) is False
        assert await service.get_all() == []
        assert await service.clear_all() == 0
        assert logger.warning.call_count == 3

    @pytest.mark.asyncio
    async def test_unavailable_repository(self, make_query_result):
        service = HistoryService(None)

        assert not service.is_available()
        assert await service.save('Madrid', make_query_result()) is False
        assert (await service.get_stats())['total'] == 0
