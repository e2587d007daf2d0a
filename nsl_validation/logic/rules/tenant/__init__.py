"""Tenant definition rules (T-series)."""
