"""HR Dashboard API application."""
