"""Global objective (process) rules (GO-series)."""
