"""PyQt6 frontend for the calculator widget."""
