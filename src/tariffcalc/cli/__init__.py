"""tariffcalc CLI: Typer commands over the scoring engine."""
from __future__ import annotations


def __getattr__(name: str) -> object:
    if name == "app":
        from tariffcalc.cli.commands import app
        return app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["app"]
