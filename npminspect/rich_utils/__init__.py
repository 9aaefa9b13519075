"""Terminal output helpers built on Rich."""
