"""Adapters wrapping external programs and file-system notifications."""
