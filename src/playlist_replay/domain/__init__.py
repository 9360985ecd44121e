"""Domain layer - business logic with no I/O."""
