"""Core data models, errors and configuration"""

from wlenv.core.config import settings
from wlenv.core.errors import (
    BindError,
    BorrowError,
    DuplicateSlotError,
    InitializationError,
    MissingGlobalError,
    TransportError,
    UndeclaredGlobalError,
    WlEnvError,
)
from wlenv.core.interfaces import Interface
from wlenv.core.models import (
    GlobalAdded,
    GlobalAdvertisement,
    GlobalEvent,
    GlobalRemoved,
    SlotKind,
)

__all__ = [
    "BindError",
    "BorrowError",
    "DuplicateSlotError",
    "InitializationError",
    "MissingGlobalError",
    "TransportError",
    "UndeclaredGlobalError",
    "WlEnvError",
    "Interface",
    "GlobalAdded",
    "GlobalAdvertisement",
    "GlobalEvent",
    "GlobalRemoved",
    "SlotKind",
    "settings",
]
