"""Admin panel for stall registration."""
