"""Testes unitários para DynamoDBHistoryRepository"""
import json
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from weather_cli.domain.entities.search_history import SearchHistoryEntry
from weather_cli.infrastructure.adapters.output.persistence.dynamodb_history_repository import (
    DynamoDBHistoryRepository,
)

TABLE = 'test-history'
BASE_TIME = datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)


def make_entry(index: int, city: str = 'Madrid') -> SearchHistoryEntry:
    return SearchHistoryEntry(
        search_query=f"{city}, ES",
        city_name=city,
        country_code='ES',
        temperature=20.0,
        feels_like=19.5,
        humidity=60,
        condition='Clear',
        description='cielo claro',
        searched_at=BASE_TIME + timedelta(minutes=index),
        id=f"entry-{index}"
    )


def make_item(entry: SearchHistoryEntry) -> dict:
    return {
        'pk': {'S': 'history'},
        'searchedAt': {'S': entry.searched_at.isoformat()},
        'data': {'S': json.dumps(entry.to_dict())},
    }


def make_key(index: int) -> dict:
    return {
        'pk': {'S': 'history'},
        'searchedAt': {'S': (BASE_TIME + timedelta(minutes=index)).isoformat()},
    }


@pytest.fixture
def mock_client():
    client = AsyncMock()
    client.query.return_value = {'Items': []}
    client.batch_write_item.return_value = {}
    return client


@pytest.fixture
def mock_client_manager(mock_client):
    """Mock do gerenciador de cliente"""
    manager = MagicMock()
    manager.get_client = AsyncMock(return_value=mock_client)
    manager.close = AsyncMock()
    return manager


@pytest.fixture
def make_repository(mock_client_manager, silent_logger):
    def _make(max_entries: int = 100):
        return DynamoDBHistoryRepository(
            table_name=TABLE,
            client_manager=mock_client_manager,
            max_entries=max_entries,
            logger=silent_logger
        )

    return _make


def deleted_keys(mock_client) -> list:
    return [
        request['DeleteRequest']['Key']
        for call in mock_client.batch_write_item.await_args_list
        for request in call.kwargs['RequestItems'][TABLE]
    ]


class TestSave:

    @pytest.mark.asyncio
    async def test_put_item_layout(self, make_repository, mock_client):
        await make_repository().save(make_entry(1, 'Málaga'))

        item = mock_client.put_item.await_args.kwargs['Item']
        assert mock_client.put_item.await_args.kwargs['TableName'] == TABLE
        assert item['pk'] == {'S': 'history'}
        assert item['cityName'] == {'S': 'málaga'}
        assert json.loads(item['data']['S'])['id'] == 'entry-1'

    @pytest.mark.asyncio
    async def test_save_within_cap_deletes_nothing(self, make_repository, mock_client):
        mock_client.query.return_value = {'Items': [make_key(i) for i in range(3)]}

        await make_repository(max_entries=3).save(make_entry(3))

        mock_client.batch_write_item.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_save_trims_oldest_beyond_cap_across_pages(self, make_repository, mock_client):
        """REGRA: somente as max_entries mais recentes permanecem, mesmo com paginação"""
        mock_client.query.side_effect = [
            {'Items': [make_key(i) for i in (5, 4, 3)], 'LastEvaluatedKey': make_key(3)},
            {'Items': [make_key(i) for i in (2, 1)]},
        ]

        await make_repository(max_entries=2).save(make_entry(5))

        assert deleted_keys(mock_client) == [make_key(3), make_key(2), make_key(1)]
        second_query = mock_client.query.await_args_list[1].kwargs
        assert second_query['ExclusiveStartKey'] == make_key(3)
        assert second_query['ScanIndexForward'] is False


class TestReads:

    @pytest.mark.asyncio
    async def test_get_all_follows_pages_until_limit(self, make_repository, mock_client):
        mock_client.query.side_effect = [
            {'Items': [make_item(make_entry(9))], 'LastEvaluatedKey': make_key(9)},
            {'Items': [make_item(make_entry(8)), make_item(make_entry(7))], 'LastEvaluatedKey': make_key(7)},
        ]

        entries = await make_repository().get_all(limit=2)

        assert [e.id for e in entries] == ['entry-9', 'entry-8']
        assert mock_client.query.await_count == 2

    @pytest.mark.asyncio
    async def test_get_all_is_capped_at_max_entries(self, make_repository, mock_client):
        mock_client.query.return_value = {'Items': [make_item(make_entry(i)) for i in range(3)]}

        entries = await make_repository(max_entries=2).get_all()

        assert len(entries) == 2
        assert mock_client.query.await_args.kwargs['Limit'] == 2

    @pytest.mark.asyncio
    async def test_find_by_city_reads_every_page(self, make_repository, mock_client):
        mock_client.query.side_effect = [
            {'Items': [], 'LastEvaluatedKey': make_key(50)},
            {'Items': [make_item(make_entry(1, 'Madrid'))]},
        ]

        entries = await make_repository().find_by_city('  MADRID ')

        assert [e.city_name for e in entries] == ['Madrid']
        params = mock_client.query.await_args_list[0].kwargs
        assert params['FilterExpression'] == 'contains(cityName, :city)'
        assert params['ExpressionAttributeValues'] == {
            ':pk': {'S': 'history'},
            ':city': {'S': 'madrid'},
        }


class TestClear:

    @pytest.mark.asyncio
    async def test_clear_deletes_all_pages_in_batches_of_25(self, make_repository, mock_client):
        mock_client.query.side_effect = [
            {'Items': [make_key(i) for i in range(20)], 'LastEvaluatedKey': make_key(19)},
            {'Items': [make_key(i) for i in range(20, 30)]},
        ]

        removed = await make_repository().clear()

        assert removed == 30
        batch_sizes = [
            len(call.kwargs['RequestItems'][TABLE])
            for call in mock_client.batch_write_item.await_args_list
        ]
        assert batch_sizes == [25, 5]

    @pytest.mark.asyncio
    async def test_unprocessed_items_are_resubmitted(self, make_repository, mock_client):
        mock_client.query.return_value = {'Items': [make_key(1), make_key(2)]}
        leftover = [{'DeleteRequest': {'Key': make_key(2)}}]
        mock_client.batch_write_item.side_effect = [
            {'UnprocessedItems': {TABLE: leftover}},
            {},
        ]

        removed = await make_repository().clear()

        assert removed == 2
        retry_call = mock_client.batch_write_item.await_args_list[1]
        assert retry_call.kwargs['RequestItems'] == {TABLE: leftover}

    @pytest.mark.asyncio
    async def test_persistently_unprocessed_items_are_not_counted(self, make_repository, mock_client, silent_logger):
        """REGRA: clear não reporta como removido o que o DynamoDB não processou"""
        mock_client.query.return_value = {'Items': [make_key(1), make_key(2)]}
        mock_client.batch_write_item.return_value = {
            'UnprocessedItems': {TABLE: [{'DeleteRequest': {'Key': make_key(2)}}]}
        }

        removed = await make_repository().clear()

        assert removed == 1
        assert mock_client.batch_write_item.await_count == 3
        silent_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_close_releases_client(self, make_repository, mock_client_manager):
        await make_repository().close()
        mock_client_manager.close.assert_awaited_once()
