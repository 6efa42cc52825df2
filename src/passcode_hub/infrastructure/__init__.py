"""Infrastructure layer: SQL generation for the passcode store."""
