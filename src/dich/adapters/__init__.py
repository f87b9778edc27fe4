"""Storage adapters for dich."""
