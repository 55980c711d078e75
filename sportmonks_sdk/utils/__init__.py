"""Helpers shared by resources and callers: input validation and polling."""
