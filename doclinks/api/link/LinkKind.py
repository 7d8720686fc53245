"""Link kinds."""

from enum import Enum


class LinkKind(str, Enum):
    """How a link names its target."""

    DIRECT = "direct"
    REFERENCE_USE = "reference_use"
    REFERENCE_DEFINITION = "reference_definition"
