"""Static configuration data for PyTabFunc."""
