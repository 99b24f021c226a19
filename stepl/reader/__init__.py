"""Minimal reader turning source text into stepl forms."""
