"""Shared helpers: alphabets, typed errors and logging setup."""
