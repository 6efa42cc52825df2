"""Domain layer for passcode issuing and verification."""
