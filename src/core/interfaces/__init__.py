"""Core interfaces.

Protocols implemented by concrete adapters. The core depends on these
abstractions, never on the occ subprocess adapters themselves.
"""
