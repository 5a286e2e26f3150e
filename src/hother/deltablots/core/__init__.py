"""Core parsing machinery."""
