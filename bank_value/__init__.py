"""Bank Value - terminal panel for a player's bank inventory value."""

__version__ = "0.1.0"
