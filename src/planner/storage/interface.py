from abc import ABC, abstractmethod

CURRENT_TRIP_KEY = "planner.current_trip"


class TripStorage(ABC):
    """Durable key-value slot holding the current trip identifier."""

    @abstractmethod
    async def save(self, trip_id: str) -> None: ...

    @abstractmethod
    async def get(self) -> str | None: ...

    @abstractmethod
    async def remove(self) -> None: ...


def get_trip_storage() -> TripStorage:
    from planner.config import get_config

    config = get_config()
    if config.trip_storage_backend == "dynamodb":
        from planner.clients import get_dynamo_client
        from planner.storage.dynamo_storage import DynamoTripStorage

        return DynamoTripStorage(get_dynamo_client(), config.trips_table, config.device_id)

    from planner.storage.file_storage import FileTripStorage

    return FileTripStorage(config.trip_storage_path)
