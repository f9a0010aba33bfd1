"""
Append-only JSONL journal of records.

Design:
- One encoded Record per line
- Atomic appends with fcntl file locking, so several processes (the
  optimizer driver and its trial workers) can share one file
- Replay by iterating the file front to back; nothing is indexed
"""

import fcntl
import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

from .codec import decode, encode
from .config import JournalConfig
from .errors import DecodeError
from .schema.record import Record

logger = logging.getLogger(__name__)


class RecordJournal:
    """
    Append-only journal of study and evaluation records.

    Example:
        journal = RecordJournal("runs/study.jsonl")
        journal.append(study)
        journal.append(EvalRecord(study="s1", trial=0, state=EvalState.INTERIM, ...))

        for record in journal:
            ...
    """

    def __init__(
        self,
        path: Union[str, Path],
        lock: bool = True,
        skip_malformed: bool = False,
    ):
        """
        Initialize journal.

        Args:
            path: Path to the .jsonl file (created on first append)
            lock: Hold an exclusive lock while writing
            skip_malformed: Default for iteration; log and skip lines that
                fail to decode instead of raising
        """
        self.path = Path(path)
        self.lock = lock
        self.skip_malformed = skip_malformed

    @classmethod
    def from_config(cls, config: JournalConfig) -> 'RecordJournal':
        return cls(config.path, lock=config.lock, skip_malformed=config.skip_malformed)

    def append(self, record: Record) -> None:
        """Append one record as a single line."""
        self.extend([record])

    def extend(self, records: Iterable[Record]) -> None:
        """Append several records under one lock."""
        lines = [encode(r) + "\n" for r in records]
        if not lines:
            return

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            if self.lock:
                fcntl.flock(f, fcntl.LOCK_EX)
            try:
                f.write("".join(lines))
                f.flush()
            finally:
                if self.lock:
                    fcntl.flock(f, fcntl.LOCK_UN)
        logger.debug(f"Appended {len(lines)} record(s) to {self.path}")

    def iter_records(self, skip_malformed: bool = False) -> Iterator[Record]:
        """
        Yield records in file order.

        Args:
            skip_malformed: Log and skip undecodable lines instead of raising

        Raises:
            DecodeError: a line is malformed and skip_malformed is False.
                The message carries the 1-based line number.
        """
        if not self.path.exists():
            return

        with open(self.path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    yield decode(line)
                except DecodeError as e:
                    if not skip_malformed:
                        raise DecodeError(f"{e.message} (line {lineno})", field=e.field) from e
                    logger.warning(f"Skipping malformed record at {self.path}:{lineno}: {e}")

    def __iter__(self) -> Iterator[Record]:
        return self.iter_records(skip_malformed=self.skip_malformed)
