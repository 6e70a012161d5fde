"""Integration package for upstream providers."""
