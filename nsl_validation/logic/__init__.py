"""Business logic bundled with nsl_validation: extractors, rules and their configuration."""
