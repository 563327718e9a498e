"""Prototype templates for content items."""

from .registry import PrototypeEntry, PrototypeRegistry

__all__ = ["PrototypeEntry", "PrototypeRegistry"]
