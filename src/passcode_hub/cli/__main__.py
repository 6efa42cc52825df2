"""
CLI entry point for PasscodeHub.

Usage:
    python -m passcode_hub.cli <command> [options]

Available commands:
    save    - Save (or replace) a subject's passcode
    load    - Look up a subject's passcode
    delete  - Remove a subject's passcode

Examples:
    python -m passcode_hub.cli save user-42 839201 --ttl 300
    python -m passcode_hub.cli load user-42 --show-code
    python -m passcode_hub.cli delete user-42
"""

import sys

from passcode_hub.cli.passcode import main

if __name__ == "__main__":
    sys.exit(main())
