"""Source text views consumed by lint rules."""

from parenspace.source.source_code import SourceCode

__all__ = ["SourceCode"]
