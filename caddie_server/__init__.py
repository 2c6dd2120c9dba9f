"""AI golf caddie demo backend."""
