"""PyQt6 front end."""
