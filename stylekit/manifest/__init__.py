"""Package layout checks."""
