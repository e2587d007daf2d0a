"""Rule modules, one package per family. Module name = lower-cased rule id."""
