"""
wlenv: bind the registry globals a client needs and keep track of them

Globals come in two kinds:

- "single" globals are capabilities of the server, advertised once and
  never removed (wl_compositor, wl_shm, xdg_wm_base).
- "multi" globals are resources that may exist several times and come and
  go during the session (wl_output, wl_seat).

Declare a handler per global you care about and build an Environment with
`init_environment`; everything else the server advertises is ignored.
"""

from wlenv.core import (
    BindError,
    BorrowError,
    DuplicateSlotError,
    GlobalAdded,
    GlobalAdvertisement,
    GlobalRemoved,
    InitializationError,
    Interface,
    MissingGlobalError,
    SlotKind,
    TransportError,
    UndeclaredGlobalError,
    WlEnvError,
    settings,
)
from wlenv.environment import Environment, init_environment
from wlenv.handlers import MultiGlobalHandler, SimpleGlobal, SimpleMultiGlobal, SingleGlobalHandler
from wlenv.protocol import InMemoryTransport, Proxy, Transport

__version__ = "0.1.0"

__all__ = [
    "BindError",
    "BorrowError",
    "DuplicateSlotError",
    "GlobalAdded",
    "GlobalAdvertisement",
    "GlobalRemoved",
    "InitializationError",
    "Interface",
    "MissingGlobalError",
    "SlotKind",
    "TransportError",
    "UndeclaredGlobalError",
    "WlEnvError",
    "settings",
    "Environment",
    "init_environment",
    "MultiGlobalHandler",
    "SimpleGlobal",
    "SimpleMultiGlobal",
    "SingleGlobalHandler",
    "InMemoryTransport",
    "Proxy",
    "Transport",
]
