"""Package ecosystem support."""
