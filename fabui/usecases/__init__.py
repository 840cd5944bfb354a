"""Use-case layer for controller construction.

Modules here coordinate domain objects and ports without touching a concrete
element library or model subsystem directly.
"""
