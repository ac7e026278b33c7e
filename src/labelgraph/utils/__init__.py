"""Utility packages for the label graph system."""
