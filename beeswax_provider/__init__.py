"""Reconcile Beeswax users and roles against declared state."""

__version__ = "0.1.0"
