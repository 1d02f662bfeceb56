"""Process-level configuration and logging."""
