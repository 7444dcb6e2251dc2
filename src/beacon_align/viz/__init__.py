"""Plotting helpers (matplotlib)."""
