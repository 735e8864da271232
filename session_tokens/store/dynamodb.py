"""DynamoDB store for production deployments."""

from __future__ import annotations

import logging
import math
import time

import aioboto3

from ..errors import StoreError

logger = logging.getLogger(__name__)


class DynamoDBStore:
    """Session token store using AWS DynamoDB.

    Table schema:
        Partition key: session_id (S)
        Attributes: token (S), ttl (N, epoch seconds of expiry)

    Enable TTL on the `ttl` attribute for automatic cleanup. DynamoDB
    removes expired items lazily, so reads also check `ttl`.
    """

    def __init__(
        self,
        table_name: str = "session_tokens",
        endpoint_url: str = "",
        region_name: str = "us-west-2",
    ) -> None:
        self._table_name = table_name
        self._session = aioboto3.Session()
        self._endpoint_url = endpoint_url or None
        self._region_name = region_name

    async def put(self, key: str, value: str, ttl: int) -> None:
        try:
            async with self._session.resource(
                "dynamodb",
                endpoint_url=self._endpoint_url,
                region_name=self._region_name,
            ) as dynamodb:
                table = await dynamodb.Table(self._table_name)
                await table.put_item(
                    Item={
                        "session_id": key,
                        "token": value,
                        "ttl": math.ceil(time.time() + ttl),
                    }
                )
        except Exception as e:
            logger.error("DynamoDB put_item failed for session %s: %s", key, e)
            raise StoreError("Session store write failed") from e

    async def get(self, key: str) -> str | None:
        try:
            async with self._session.resource(
                "dynamodb",
                endpoint_url=self._endpoint_url,
                region_name=self._region_name,
            ) as dynamodb:
                table = await dynamodb.Table(self._table_name)
                response = await table.get_item(Key={"session_id": key})
        except Exception as e:
            logger.error("DynamoDB get_item failed for session %s: %s", key, e)
            raise StoreError("Session store read failed") from e

        item = response.get("Item")
        if item is None:
            return None

        if time.time() >= float(item.get("ttl", 0)):
            return None

        return item["token"]
