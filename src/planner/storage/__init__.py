"""Local persistence of the current trip identifier."""

from planner.storage.dynamo_storage import DynamoTripStorage
from planner.storage.file_storage import FileTripStorage
from planner.storage.interface import TripStorage, get_trip_storage

__all__ = ["DynamoTripStorage", "FileTripStorage", "TripStorage", "get_trip_storage"]
