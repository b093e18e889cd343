"""Utility helpers for todotree."""
