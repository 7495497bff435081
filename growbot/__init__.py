"""Game rules, configuration and button payloads for a group-chat growing game bot."""

__version__ = "0.1.0"