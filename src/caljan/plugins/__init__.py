"""Plugin system — pluggy hooks for janitor lifecycle events."""

from caljan.plugins.hookspecs import hookimpl

__all__ = ["hookimpl"]
