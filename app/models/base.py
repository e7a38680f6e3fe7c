import time
from typing import Callable

from pydantic import BaseModel, ConfigDict


Identity = str

# Clocks return coarse wall-clock time as integer unix seconds.
Clock = Callable[[], int]


def unix_now() -> int:
    return int(time.time())


class LedgerModel(BaseModel):
    """Immutable value record shared by the registry, ledger and event bus."""

    model_config = ConfigDict(frozen=True)
