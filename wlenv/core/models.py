"""Core data models for registry notifications and slots"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Registry ids and versions are u32 on the wire
U32_MAX = 2**32 - 1


class SlotKind(str, Enum):
    """How many live instances of a global the client tracks"""

    SINGLE = "single"  # a capability of the server, e.g. wl_compositor
    MULTI = "multi"    # a resource that may come and go, e.g. wl_output


class GlobalAdvertisement(BaseModel):
    """A global as announced by the server registry"""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0, le=U32_MAX)
    interface_name: str = Field(min_length=1)
    version: int = Field(ge=1, le=U32_MAX)


class GlobalAdded(GlobalAdvertisement):
    """Registry notification: a new global is available"""


class GlobalRemoved(BaseModel):
    """
    Registry notification: a global was retracted.

    Some transports only report the id on removal, in which case
    interface_name is None and the dispatcher resolves it itself.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0, le=U32_MAX)
    interface_name: Optional[str] = None


GlobalEvent = Union[GlobalAdded, GlobalRemoved]
