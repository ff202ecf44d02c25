"""Core building blocks: request layer, exceptions and logging."""
