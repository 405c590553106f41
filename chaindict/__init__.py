"""Insertion-ordered key-item container built on a singly-linked chain."""

from .datastructures import Dictionary, ItemRef

__all__ = ["Dictionary", "ItemRef"]
