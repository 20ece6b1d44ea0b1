"""Exceptions raised by the environment layer"""

from typing import Optional


class WlEnvError(Exception):
    """Base class for every error raised by wlenv"""


class TransportError(WlEnvError):
    """The connection to the server failed"""


class BindError(TransportError):
    """A global could not be bound at the requested version"""

    def __init__(self, interface_name: str, id: int, version: int, reason: str) -> None:
        self.interface_name = interface_name
        self.id = id
        self.version = version
        super().__init__(f"Cannot bind {interface_name}@{id} v{version}: {reason}")


class InitializationError(WlEnvError):
    """A synchronization round failed while building an environment"""

    def __init__(self, round_no: int, cause: Optional[BaseException] = None) -> None:
        self.round = round_no
        message = f"Initial roundtrip {round_no} failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class MissingGlobalError(WlEnvError, LookupError):
    """A global the application cannot run without was never advertised"""

    def __init__(self, interface_name: str) -> None:
        self.interface_name = interface_name
        super().__init__(f"A missing global was required: {interface_name}")


class UndeclaredGlobalError(WlEnvError, LookupError):
    """An accessor was called for an interface the environment does not declare"""

    def __init__(self, interface_name: str, kind: str) -> None:
        self.interface_name = interface_name
        self.kind = kind
        super().__init__(f"{interface_name} is not declared as a {kind} global in this environment")


class DuplicateSlotError(WlEnvError, ValueError):
    """The same interface was declared for more than one slot"""

    def __init__(self, interface_name: str) -> None:
        self.interface_name = interface_name
        super().__init__(f"Interface {interface_name} is declared more than once")


class BorrowError(WlEnvError, RuntimeError):
    """Shared environment state was accessed while exclusively held"""
