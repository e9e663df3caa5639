"""Readers for member data files."""
