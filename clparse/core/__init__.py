"""Core configuration and logging for clparse."""
