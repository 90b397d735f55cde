"""Directory scanning and name matching."""
