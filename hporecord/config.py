"""Journal configuration loaded from environment variables."""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_JOURNAL = "hporecord.jsonl"


class JournalConfig(BaseModel):
    """
    Settings for a RecordJournal.

    Environment variables (a ``.env`` file is honoured by the CLI):
    - HPORECORD_JOURNAL: journal path
    - HPORECORD_LOCK: take an exclusive file lock per append (default true)
    - HPORECORD_SKIP_MALFORMED: log and skip undecodable lines (default false)
    """

    path: str = Field(default=DEFAULT_JOURNAL, description="Path to the JSONL journal")
    lock: bool = Field(default=True, description="Lock the file around appends")
    skip_malformed: bool = Field(
        default=False,
        description="Skip undecodable lines instead of raising"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, path: Optional[str] = None) -> 'JournalConfig':
        """Build config from environment, with an optional path override."""
        values = {}
        env_path = os.environ.get("HPORECORD_JOURNAL")
        if path or env_path:
            values["path"] = path or env_path
        if "HPORECORD_LOCK" in os.environ:
            values["lock"] = os.environ["HPORECORD_LOCK"]
        if "HPORECORD_SKIP_MALFORMED" in os.environ:
            values["skip_malformed"] = os.environ["HPORECORD_SKIP_MALFORMED"]
        return cls(**values)
