"""Matchmaker agent - professional networking profiles and introductions from chat."""

__version__ = "0.1.0"
