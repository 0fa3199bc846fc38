"""JSON file store on the device."""

import json
import logging
from pathlib import Path

from planner.errors import ErrorCode, PersistenceError

from .interface import CURRENT_TRIP_KEY, TripStorage

logger = logging.getLogger(__name__)


class FileTripStorage(TripStorage):
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    async def save(self, trip_id: str) -> None:
        try:
            data = self._read()
            data[CURRENT_TRIP_KEY] = trip_id
            self._write(data)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Could not save trip {trip_id} to {self._path}: {e}") from e

    async def get(self) -> str | None:
        try:
            value = self._read().get(CURRENT_TRIP_KEY)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Could not read {self._path}: {e}", code=ErrorCode.INTERNAL_ERROR) from e
        return str(value) if value else None

    async def remove(self) -> None:
        try:
            data = self._read()
            if data.pop(CURRENT_TRIP_KEY, None) is not None:
                self._write(data)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Could not clear {self._path}: {e}", code=ErrorCode.INTERNAL_ERROR) from e

    def _read(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        data = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return data

    def _write(self, data: dict[str, object]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Write-then-rename so a crash never leaves a truncated file.
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        tmp_path.replace(self._path)
        logger.debug("Wrote %s", self._path)
