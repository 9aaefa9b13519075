"""Core services for npminspect."""
