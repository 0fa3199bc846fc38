"""DynamoDB-backed trip slot, keyed by device."""

import logging
from time import time
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from planner.errors import ErrorCode, PersistenceError

from .interface import CURRENT_TRIP_KEY, TripStorage

logger = logging.getLogger(__name__)


class DynamoTripStorage(TripStorage):
    # The boto3 client is synchronous; the async interface matches FileTripStorage.
    def __init__(self, dynamo_client: Any, table_name: str, device_id: str) -> None:
        self._client = dynamo_client
        self._table = table_name
        self._device_id = device_id

    def _key(self) -> dict[str, dict[str, str]]:
        return {"deviceId": {"S": self._device_id}, "slot": {"S": CURRENT_TRIP_KEY}}

    async def save(self, trip_id: str) -> None:
        try:
            self._client.put_item(
                TableName=self._table,
                Item={**self._key(), "tripId": {"S": trip_id}, "savedAt": {"N": str(int(time()))}},
            )
        except (BotoCoreError, ClientError) as e:
            raise PersistenceError(f"Could not save trip {trip_id} for device {self._device_id}: {e}") from e
        logger.info("Saved trip %s for device %s", trip_id, self._device_id)

    async def get(self) -> str | None:
        try:
            response = self._client.get_item(TableName=self._table, Key=self._key())
        except (BotoCoreError, ClientError) as e:
            raise PersistenceError(
                f"Could not read trip for device {self._device_id}: {e}", code=ErrorCode.INTERNAL_ERROR
            ) from e
        item = response.get("Item")
        if not item:
            return None
        return item["tripId"]["S"]

    async def remove(self) -> None:
        """delete_item is idempotent; no error for a missing slot."""
        try:
            self._client.delete_item(TableName=self._table, Key=self._key())
        except (BotoCoreError, ClientError) as e:
            raise PersistenceError(
                f"Could not clear trip for device {self._device_id}: {e}", code=ErrorCode.INTERNAL_ERROR
            ) from e
