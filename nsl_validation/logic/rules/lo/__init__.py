"""Local objective rules (L-series)."""
