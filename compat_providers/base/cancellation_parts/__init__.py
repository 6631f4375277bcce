"""Cancellation primitives; import from ``base.cancellation``."""
