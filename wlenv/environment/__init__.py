"""Environment facade, dispatcher and initialization"""

from wlenv.environment.cell import SharedCell
from wlenv.environment.dispatcher import EnvironmentState, GlobalDispatcher
from wlenv.environment.environment import Environment
from wlenv.environment.init import init_environment
from wlenv.environment.slots import Slot, SlotTable

__all__ = [
    "SharedCell",
    "EnvironmentState",
    "GlobalDispatcher",
    "Environment",
    "init_environment",
    "Slot",
    "SlotTable",
]
