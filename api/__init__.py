"""HTTP layer for the quiz runner."""
