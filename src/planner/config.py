from os import environ
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_base_url: str
    api_timeout_seconds: float
    trip_storage_backend: Literal["file", "dynamodb"]
    trip_storage_path: str
    aws_region: str
    dynamodb_endpoint: str | None = None
    trips_table: str
    device_id: str
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config, for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        api_base_url=environ.get("API_BASE_URL", "http://localhost:3333"),
        api_timeout_seconds=environ.get("API_TIMEOUT_SECONDS", "10"),
        trip_storage_backend=environ.get("TRIP_STORAGE_BACKEND", "file"),
        trip_storage_path=environ.get("TRIP_STORAGE_PATH", "~/.planner/trip.json"),
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        trips_table=environ.get("TRIPS_TABLE", "PlannerDeviceTrips"),
        device_id=environ.get("DEVICE_ID", "local-device"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
