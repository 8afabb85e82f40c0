"""Hexxagon board game: rules, computer opponent, save files, leaderboard and a pygame window."""

__version__ = "1.0.0"