"""StoryQuest - a small text adventure engine."""

__version__ = "0.1.0"
