from .linked_list import LinkedList
from .dictionary import Dictionary, ItemRef

__all__ = [
    "LinkedList",
    "Dictionary",
    "ItemRef",
]
