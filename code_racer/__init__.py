"""Minimum keystroke-cost encoding of whole texts with input-method dictionaries, with a report on the route."""

__version__ = "0.4.0"