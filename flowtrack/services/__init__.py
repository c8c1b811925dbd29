"""Domain services for Flowtrack."""
