"""Building an environment against a live connection"""

from types import SimpleNamespace
from typing import Any, Iterable, Mapping, Optional

from loguru import logger

from wlenv.core.config import settings
from wlenv.core.errors import InitializationError, TransportError
from wlenv.core.models import SlotKind
from wlenv.environment.cell import SharedCell
from wlenv.environment.dispatcher import EnvironmentState, GlobalDispatcher
from wlenv.environment.environment import Environment
from wlenv.environment.slots import SlotTable
from wlenv.handlers.base import MultiGlobalHandler, SingleGlobalHandler
from wlenv.protocol.transport import Transport


def init_environment(
    transport: Transport,
    singles: Iterable[SingleGlobalHandler] = (),
    multis: Iterable[MultiGlobalHandler] = (),
    extras: Any = None,
    roundtrips: Optional[int] = None,
) -> Environment:
    """
    Initialize an Environment.

        env = init_environment(
            transport,
            singles=[SimpleGlobal(WlCompositor), SimpleGlobal(WlShm)],
            multis=[SimpleMultiGlobal(WlOutput)],
            extras={"title": "demo"},
        )

    Globals not listed in `singles` or `multis` are ignored. `extras` is
    any object (a mapping is turned into a namespace) later reachable
    through `Environment.with_extras`.

    Runs the synchronization rounds before returning: the first receives
    the global list, the second lets the handlers finish their own setup.
    Raises InitializationError if any round fails; no environment is
    returned in that case.
    """
    rounds = settings.INIT_ROUNDTRIPS if roundtrips is None else roundtrips
    if rounds < 2:
        raise ValueError(f"At least 2 initial roundtrips are needed, got {rounds}")

    slots = SlotTable(singles, multis)
    if extras is None:
        extras = SimpleNamespace()
    elif isinstance(extras, Mapping):
        extras = SimpleNamespace(**extras)

    cell = SharedCell(EnvironmentState(slots=slots, extras=extras))
    dispatcher = GlobalDispatcher(cell, transport)
    transport.subscribe(dispatcher)

    try:
        for round_no in range(1, rounds + 1):
            try:
                transport.synchronize()
            except TransportError as exc:
                logger.warning("Initial roundtrip {round} failed: {error}", round=round_no, error=exc)
                raise InitializationError(round_no, exc) from exc
            logger.debug("Initial roundtrip {round} complete", round=round_no)
    except Exception:
        transport.unsubscribe(dispatcher)
        raise

    logger.info(
        "Environment ready: {singles} singles, {multis} multis declared, {live} globals bound",
        singles=slots.count(SlotKind.SINGLE),
        multis=slots.count(SlotKind.MULTI),
        live=len(dispatcher.advertised()),
    )
    return Environment(transport, cell, dispatcher)
