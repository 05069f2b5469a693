"""Core helpers for lissatunnel."""

from lissatunnel.core.event import Event

__all__ = ["Event"]
