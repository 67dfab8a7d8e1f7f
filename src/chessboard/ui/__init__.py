"""Qt adapters for board views."""
