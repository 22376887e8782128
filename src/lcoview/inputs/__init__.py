"""Coverage data readers."""
