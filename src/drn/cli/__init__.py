"""drn command-line interface."""
