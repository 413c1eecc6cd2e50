"""Counting operations and the round-trip self-check."""
