"""Entity notation rules (V-series)."""
