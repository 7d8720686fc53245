"""Path filter: which discovered entries are scanned."""

from .should_exclude import should_exclude

__all__ = ["should_exclude"]
