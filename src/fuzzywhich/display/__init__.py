"""Terminal rendering of matches."""
