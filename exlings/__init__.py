"""Command-line companion for building, running and tracking a course of small exercises."""

__version__ = "4.6.0"