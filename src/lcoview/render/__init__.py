"""HTML page and terminal summary rendering."""
