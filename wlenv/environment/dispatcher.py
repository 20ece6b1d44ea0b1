"""Routes registry notifications to the handler declared for each interface"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from loguru import logger

from wlenv.core.models import GlobalAdded, GlobalAdvertisement, GlobalEvent, GlobalRemoved, SlotKind
from wlenv.environment.cell import SharedCell
from wlenv.environment.slots import Slot, SlotTable
from wlenv.protocol.transport import Transport


@dataclass
class EnvironmentState:
    """Everything an environment owns: the declared slots and the application extras"""

    slots: SlotTable
    extras: Any


class GlobalDispatcher:
    """
    Registry listener of an environment.

    One table lookup and one handler call per notification, applied in the
    order the transport delivers them. Notifications for undeclared
    interfaces are dropped.
    """

    def __init__(self, cell: SharedCell[EnvironmentState], transport: Transport) -> None:
        self._cell = cell
        self._transport = transport
        # Live declared globals, also used to resolve removals that carry no name
        self._live: Dict[int, GlobalAdvertisement] = {}
        self.events_routed = 0
        self.events_ignored = 0

    def __call__(self, event: GlobalEvent) -> None:
        self.dispatch(event)

    def dispatch(self, event: GlobalEvent) -> None:
        if isinstance(event, GlobalAdded):
            self._global_added(event)
        elif isinstance(event, GlobalRemoved):
            self._global_removed(event)
        else:
            raise TypeError(f"Not a registry notification: {event!r}")

    def advertised(self) -> List[GlobalAdvertisement]:
        """Live advertisements of declared interfaces, in announcement order"""
        return list(self._live.values())

    def _resolve(self, interface_name: str) -> Optional[Slot]:
        with self._cell.borrow_mut() as state:
            return state.slots.lookup(interface_name)

    def _global_added(self, event: GlobalAdded) -> None:
        slot = self._resolve(event.interface_name)
        if slot is None:
            self.events_ignored += 1
            logger.debug(
                "Ignoring unknown global {interface} id={id}",
                interface=event.interface_name,
                id=event.id,
            )
            return

        # State window is closed again: handlers may use the environment freely
        slot.handler.created(self._transport, event.id, event.version)
        self._live[event.id] = GlobalAdvertisement(
            id=event.id, interface_name=event.interface_name, version=event.version
        )
        self.events_routed += 1
        logger.debug(
            "Global {interface} id={id} v{version} -> {kind} slot",
            interface=event.interface_name,
            id=event.id,
            version=event.version,
            kind=slot.kind.value,
        )

    def _global_removed(self, event: GlobalRemoved) -> None:
        interface_name = event.interface_name
        if interface_name is None:
            live = self._live.get(event.id)
            if live is None:
                self.events_ignored += 1
                logger.debug("Ignoring removal of unknown global id={id}", id=event.id)
                return
            interface_name = live.interface_name

        slot = self._resolve(interface_name)
        if slot is None:
            self.events_ignored += 1
            logger.debug(
                "Ignoring removal of unknown global {interface} id={id}",
                interface=interface_name,
                id=event.id,
            )
            return

        live = self._live.get(event.id)
        if live is not None and live.interface_name == interface_name:
            del self._live[event.id]

        self.events_routed += 1
        if slot.kind is SlotKind.SINGLE:
            logger.warning(
                "Server removed single global {interface} id={id}, keeping the stale binding",
                interface=interface_name,
                id=event.id,
            )
            return

        slot.handler.removed(event.id)
        logger.debug("Global {interface} id={id} removed", interface=interface_name, id=event.id)

    def get_stats(self) -> Dict[str, int]:
        return {
            "live": len(self._live),
            "routed": self.events_routed,
            "ignored": self.events_ignored,
        }
