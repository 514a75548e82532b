"""
DynamoDB Client Manager - cliente aioboto3 reutilizado dentro do event loop
"""
import asyncio
from typing import Optional

import aioboto3
from botocore.config import Config


class DynamoDBClientManager:
    """
    Gerenciador de cliente DynamoDB com aioboto3

    - Reutiliza o cliente no mesmo event loop
    - Recria quando o loop muda (asyncio.run cria novos loops)

    Uso:
        manager = DynamoDBClientManager(region_name='eu-west-1')
        client = await manager.get_client()
        response = await client.put_item(...)
    """

    def __init__(
        self,
        region_name: str = 'eu-west-1',
        connect_timeout: int = 3,
        read_timeout: int = 3
    ):
        self.region_name = region_name
        self.session = aioboto3.Session()
        self.boto_config = Config(
            region_name=region_name,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={'max_attempts': 2, 'mode': 'adaptive'}
        )
        self._client = None
        self._client_loop_id: Optional[int] = None
        self._client_context_manager = None

    async def get_client(self):
        current_loop_id = id(asyncio.get_running_loop())

        if self._client is not None and self._client_loop_id == current_loop_id:
            return self._client

        if self._client is not None:
            await self.close()

        self._client_context_manager = self.session.client(
            'dynamodb',
            region_name=self.region_name,
            config=self.boto_config
        )
        self._client = await self._client_context_manager.__aenter__()
        self._client_loop_id = current_loop_id
        return self._client

    async def close(self) -> None:
        if self._client_context_manager is not None:
            try:
                await self._client_context_manager.__aexit__(None, None, None)
            finally:
                self._client = None
                self._client_loop_id = None
                self._client_context_manager = None
