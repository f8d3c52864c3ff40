"""Subtitle matching, episode lookup and configuration."""
