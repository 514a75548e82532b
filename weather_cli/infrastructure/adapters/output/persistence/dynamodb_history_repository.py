"""
Histórico de consultas em DynamoDB (aioboto3)

Estrutura do item:
{
    "pk": "history",
    "searchedAt": "2025-01-01T10:00:00+00:00",  # sort key
    "id": "...",
    "cityName": "madrid",                         # minúsculas para busca
    "data": {...}                                 # JSON string
}

Mesma política do backend em arquivo: somente as `max_entries` entradas mais
recentes são mantidas. Todas as leituras seguem `LastEvaluatedKey`.
"""
import json
from typing import Any, AsyncIterator, Dict, List, Optional

from weather_cli.application.ports.output.history_repository_port import IHistoryRepository
from weather_cli.domain.entities.search_history import SearchHistoryEntry
from weather_cli.infrastructure.adapters.output.persistence.dynamodb_client_manager import DynamoDBClientManager
from weather_cli.shared.config.logger_config import get_logger
from weather_cli.shared.config.settings import HISTORY_MAX_ENTRIES

PARTITION_KEY = 'history'
KEY_PROJECTION = 'pk, searchedAt'

# BatchWriteItem aceita até 25 itens por request
BATCH_SIZE = 25
MAX_UNPROCESSED_ROUNDS = 3


class DynamoDBHistoryRepository(IHistoryRepository):
    """Tabela com chave de partição `pk` e chave de ordenação `searchedAt`"""

    def __init__(
        self,
        table_name: str,
        client_manager: Optional[DynamoDBClientManager] = None,
        region_name: str = 'eu-west-1',
        max_entries: int = HISTORY_MAX_ENTRIES,
        logger=None
    ):
        self.table_name = table_name
        self.client_manager = client_manager or DynamoDBClientManager(region_name=region_name)
        self.max_entries = max_entries
        self.logger = logger or get_logger(child=True)

    def is_available(self) -> bool:
        return bool(self.table_name)

    async def _query_pages(self, **params) -> AsyncIterator[List[Dict[str, Any]]]:
        """Percorre todas as páginas da partição, mais recentes primeiro"""
        client = await self.client_manager.get_client()
        request = {
            'TableName': self.table_name,
            'KeyConditionExpression': 'pk = :pk',
            'ScanIndexForward': False,
            **params,
        }
        request['ExpressionAttributeValues'] = {
            ':pk': {'S': PARTITION_KEY},
            **params.get('ExpressionAttributeValues', {}),
        }

        while True:
            response = await client.query(**request)
            yield response.get('Items', [])

            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return
            request['ExclusiveStartKey'] = last_key

    async def save(self, entry: SearchHistoryEntry) -> None:
        client = await self.client_manager.get_client()
        await client.put_item(
            TableName=self.table_name,
            Item={
                'pk': {'S': PARTITION_KEY},
                'searchedAt': {'S': entry.searched_at.isoformat()},
                'id': {'S': entry.id},
                'cityName': {'S': entry.city_name.lower()},
                'data': {'S': json.dumps(entry.to_dict(), separators=(',', ':'))},
            }
        )
        await self._trim()

    async def _trim(self) -> int:
        """Remove as entradas além das `max_entries` mais recentes"""
        keys = []
        async for items in self._query_pages(ProjectionExpression=KEY_PROJECTION):
            keys.extend(items)

        overflow = keys[self.max_entries:]
        if not overflow:
            return 0

        removed = await self._delete_keys(overflow)
        self.logger.debug("History trimmed", removed=removed, max_entries=self.max_entries)
        return removed

    async def get_all(self, limit: Optional[int] = None) -> List[SearchHistoryEntry]:
        wanted = min(limit, self.max_entries) if limit else self.max_entries
        entries: List[SearchHistoryEntry] = []
        async for items in self._query_pages(Limit=wanted):
            entries.extend(self._to_entry(item) for item in items)
            if len(entries) >= wanted:
                break
        return entries[:wanted]

    async def find_by_city(self, city_name: str) -> List[SearchHistoryEntry]:
        entries: List[SearchHistoryEntry] = []
        async for items in self._query_pages(
            FilterExpression='contains(cityName, :city)',
            ExpressionAttributeValues={':city': {'S': city_name.strip().lower()}}
        ):
            entries.extend(self._to_entry(item) for item in items)
        return entries

    async def clear(self) -> int:
        keys = []
        async for items in self._query_pages(ProjectionExpression=KEY_PROJECTION):
            keys.extend(items)
        return await self._delete_keys(keys)

    async def _delete_keys(self, items: List[Dict[str, Any]]) -> int:
        """
        Apaga em lotes de 25, reenviando UnprocessedItems

        Returns:
            Quantidade efetivamente removida
        """
        client = await self.client_manager.get_client()
        failed = 0

        for i in range(0, len(items), BATCH_SIZE):
            pending = [
                {'DeleteRequest': {'Key': {'pk': item['pk'], 'searchedAt': item['searchedAt']}}}
                for item in items[i:i + BATCH_SIZE]
            ]
            for _ in range(MAX_UNPROCESSED_ROUNDS):
                response = await client.batch_write_item(RequestItems={self.table_name: pending})
                pending = (response.get('UnprocessedItems') or {}).get(self.table_name, [])
                if not pending:
                    break

            if pending:
                failed += len(pending)
                self.logger.warning(
                    "History delete left unprocessed items",
                    table=self.table_name,
                    unprocessed=len(pending)
                )

        return len(items) - failed

    @staticmethod
    def _to_entry(item: dict) -> SearchHistoryEntry:
        return SearchHistoryEntry.from_dict(json.loads(item['data']['S']))

    async def close(self) -> None:
        await self.client_manager.close()
