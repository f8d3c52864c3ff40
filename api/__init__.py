"""Addic7ed website client."""
