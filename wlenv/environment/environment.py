"""The Environment: application-facing access to bound globals"""

from typing import Callable, List, Optional, Type, TypeVar

from wlenv.core.errors import MissingGlobalError
from wlenv.core.interfaces import Interface
from wlenv.core.models import GlobalAdvertisement
from wlenv.environment.cell import SharedCell
from wlenv.environment.dispatcher import EnvironmentState, GlobalDispatcher
from wlenv.protocol.proxy import Proxy
from wlenv.protocol.transport import Transport

R = TypeVar("R")


class Environment:
    """
    Central point for accessing the globals of a connection.

    Any global declared when the environment was initialized can be reached
    through `get_global`, `require_global` and `get_all_globals`. Handles are
    cheap to clone and every clone observes the same state.

    Build one with `init_environment`, not directly.
    """

    def __init__(
        self,
        transport: Transport,
        cell: SharedCell[EnvironmentState],
        dispatcher: GlobalDispatcher,
    ) -> None:
        self._transport = transport
        self._cell = cell
        self._dispatcher = dispatcher

    @property
    def transport(self) -> Transport:
        """The underlying transport, for manual interaction with the registry"""
        return self._transport

    def get_global(self, interface: Type[Interface]) -> Optional[Proxy]:
        """
        Access a "single" global.

        Forwarded to the `get()` of the handler declared for `interface`.
        Returns None if the global has not (yet) been advertised.
        """
        with self._cell.borrow() as state:
            return state.slots.single(interface).get()

    def require_global(self, interface: Type[Interface]) -> Proxy:
        """
        Access a "single" global the application cannot work without.

        Raises MissingGlobalError naming the interface if the server did not
        advertise it.
        """
        proxy = self.get_global(interface)
        if proxy is None:
            raise MissingGlobalError(interface.NAME)
        return proxy

    def get_all_globals(self, interface: Type[Interface]) -> List[Proxy]:
        """All live instances of a "multi" global, oldest first"""
        with self._cell.borrow() as state:
            return state.slots.multi(interface).get_all()

    def with_extras(self, f: Callable[..., R]) -> R:
        """
        Run `f` with exclusive access to the extra values stored in the environment.

        Returns whatever `f` returns. The window is closed on every exit path;
        touching the environment from inside `f` raises BorrowError.
        """
        with self._cell.borrow_mut() as state:
            return f(state.extras)

    def advertised(self) -> List[GlobalAdvertisement]:
        """Live advertisements of the declared interfaces"""
        return self._dispatcher.advertised()

    def clone(self) -> "Environment":
        return Environment(self._transport, self._cell, self._dispatcher)

    __copy__ = clone

    def __repr__(self) -> str:
        # No borrow here, so a handle can be logged from anywhere
        stats = self._dispatcher.get_stats()
        return f"<Environment live={stats['live']} routed={stats['routed']} ignored={stats['ignored']}>"
