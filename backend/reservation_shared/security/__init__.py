"""Password hashing, JWT handling and rate limiting."""
