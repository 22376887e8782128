"""Core data model, configuration and report pipeline."""
