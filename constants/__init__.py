"""Fixed values and error types for the temperature converter."""
