"""Global handlers"""

from wlenv.handlers.base import MultiGlobalHandler, SingleGlobalHandler
from wlenv.handlers.simple import SimpleGlobal, SimpleMultiGlobal

__all__ = ["MultiGlobalHandler", "SingleGlobalHandler", "SimpleGlobal", "SimpleMultiGlobal"]
