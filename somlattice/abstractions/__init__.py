"""Shared type definitions for the SOM core."""
