"""Layers, events, input device state, allocators, graphics helpers and TCP/UDP networking."""

__version__ = "0.1.0"