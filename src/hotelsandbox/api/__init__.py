"""HTTP layer for the hotel sandbox."""
