"""Terminal output."""

from nsresolver.ui.console import Console

__all__ = ["Console"]
