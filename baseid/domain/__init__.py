"""Pure helpers (response encoding) with no I/O."""
