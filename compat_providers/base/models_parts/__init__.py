"""Data model components (one type per module); import from ``base.models``."""
