"""Anniversary Mate - anniversary and holiday reminders."""

__version__ = "0.1.0"
