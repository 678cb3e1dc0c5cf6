"""PyQt6 desktop front-end."""
