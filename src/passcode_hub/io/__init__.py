"""I/O layer: database access for passcodes."""
