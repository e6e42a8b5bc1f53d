"""Column analysis: type inference and statistics."""
