"""Shared helpers that sit outside the domain and adapter layers."""
