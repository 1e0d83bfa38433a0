from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO, NoReturn, Sequence, Union

from models.records import SensorRecord
from storage.exceptions import InvalidIndexError, RecordIOError
from storage.record_codec import RECORD_SIZE, decode_record, encode_records, record_offset

logger = logging.getLogger(__name__)


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


class RecordFile:
    """Flat file of fixed-width records addressed by offset arithmetic.

    Single-writer/single-reader: no locking is attempted.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def persist(self, records: Sequence[SensorRecord]) -> int:
        """Overwrite the file with ``records`` in one bulk write.

        Returns the number of bytes written.
        """
        payload = encode_records(records)
        try:
            handle = self.path.open("wb", buffering=0)
        except OSError as exc:
            raise RecordIOError("open file for writing", self.path, _reason(exc)) from exc

        with handle:
            try:
                written = handle.write(payload)
            except OSError as exc:
                raise RecordIOError("write to file", self.path, _reason(exc)) from exc
            try:
                handle.close()
            except OSError as exc:
                raise RecordIOError("close file", self.path, _reason(exc)) from exc

        if written != len(payload):
            raise RecordIOError(
                "write to file",
                self.path,
                f"short write ({written} of {len(payload)} bytes)",
            )

        logger.info(
            "Persisted records",
            extra={"path": str(self.path), "record_count": len(records), "byte_count": written},
        )
        return written

    def read_at(self, index: int) -> SensorRecord:
        """Seek to record ``index`` and decode exactly one record."""
        try:
            handle = self.path.open("rb")
        except OSError as exc:
            raise RecordIOError("open file for reading", self.path, _reason(exc)) from exc

        with handle:
            record_count = self._complete_records(handle)
            if not 0 <= index < record_count:
                self._reject(index, record_count)

            offset = record_offset(index)
            try:
                handle.seek(offset)
            except (OSError, OverflowError, ValueError) as exc:
                raise InvalidIndexError(index, record_count) from exc

            try:
                data = handle.read(RECORD_SIZE)
            except OSError as exc:
                raise RecordIOError("read from file", self.path, _reason(exc)) from exc

            if len(data) != RECORD_SIZE:
                self._reject(index, record_count)

        logger.info("Read record", extra={"path": str(self.path), "index": index, "offset": offset})
        return decode_record(data)

    def record_count(self) -> int:
        """Number of complete records currently in the file."""
        try:
            size = self.path.stat().st_size
        except OSError as exc:
            raise RecordIOError("stat file", self.path, _reason(exc)) from exc
        return size // RECORD_SIZE

    def _reject(self, index: int, record_count: int) -> NoReturn:
        logger.warning(
            "Record index outside file",
            extra={"path": str(self.path), "index": index, "record_count": record_count},
        )
        raise InvalidIndexError(index, record_count)

    def _complete_records(self, handle: BinaryIO) -> int:
        try:
            size = os.fstat(handle.fileno()).st_size
        except OSError as exc:
            raise RecordIOError("stat file", self.path, _reason(exc)) from exc
        return size // RECORD_SIZE
