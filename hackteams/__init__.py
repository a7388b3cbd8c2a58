"""Hackathon team roster service and fixture tooling."""

__version__ = "0.1.0"
