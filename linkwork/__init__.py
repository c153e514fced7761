"""Singly linked lists, pointer algorithms on node chains, and a longest unique substring helper."""

__version__ = "0.1.0"
__all__ = ["algorithms", "nodes", "substring"]