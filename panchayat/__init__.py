"""Village election model and functional-programming utilities."""
