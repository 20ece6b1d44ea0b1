"""Slot table: which handler is responsible for which interface"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Type, Union

from wlenv.core.errors import DuplicateSlotError, UndeclaredGlobalError
from wlenv.core.interfaces import Interface
from wlenv.core.models import SlotKind
from wlenv.handlers.base import MultiGlobalHandler, SingleGlobalHandler

Handler = Union[SingleGlobalHandler, MultiGlobalHandler]


@dataclass(frozen=True)
class Slot:
    kind: SlotKind
    handler: Handler

    @property
    def interface_name(self) -> str:
        return self.handler.interface.NAME


class SlotTable:
    """
    Immutable mapping from interface name to slot.

    Built once from the application's declaration; each interface name maps
    to at most one slot. Everything not in the table is ignored.
    """

    def __init__(
        self,
        singles: Iterable[SingleGlobalHandler] = (),
        multis: Iterable[MultiGlobalHandler] = (),
    ) -> None:
        slots = {}
        for kind, handlers, expected in (
            (SlotKind.SINGLE, singles, SingleGlobalHandler),
            (SlotKind.MULTI, multis, MultiGlobalHandler),
        ):
            for handler in handlers:
                if not isinstance(handler, expected):
                    raise TypeError(f"{handler!r} is not a {expected.__name__}")
                slot = Slot(kind=kind, handler=handler)
                if slot.interface_name in slots:
                    raise DuplicateSlotError(slot.interface_name)
                slots[slot.interface_name] = slot
        self._slots: Mapping[str, Slot] = MappingProxyType(slots)

    def lookup(self, interface_name: str) -> Optional[Slot]:
        return self._slots.get(interface_name)

    def single(self, interface: Type[Interface]) -> SingleGlobalHandler:
        slot = self._slots.get(interface.NAME)
        if slot is None or slot.kind is not SlotKind.SINGLE:
            raise UndeclaredGlobalError(interface.NAME, SlotKind.SINGLE.value)
        return slot.handler

    def multi(self, interface: Type[Interface]) -> MultiGlobalHandler:
        slot = self._slots.get(interface.NAME)
        if slot is None or slot.kind is not SlotKind.MULTI:
            raise UndeclaredGlobalError(interface.NAME, SlotKind.MULTI.value)
        return slot.handler

    def count(self, kind: SlotKind) -> int:
        return sum(1 for slot in self._slots.values() if slot.kind is kind)

    def __contains__(self, interface_name: object) -> bool:
        return interface_name in self._slots

    def __iter__(self) -> Iterator[Slot]:
        return iter(self._slots.values())

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        names = ", ".join(f"{name}:{slot.kind.value}" for name, slot in self._slots.items())
        return f"SlotTable({names})"
