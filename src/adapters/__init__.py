"""Adapters package: CLIs and user interfaces."""

__all__: list[str] = []
