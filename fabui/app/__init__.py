"""Application composition layer.

Wires the construction pipeline to concrete ports and exposes the factory
that application code registers blueprints with.
"""
