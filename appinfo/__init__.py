"""Canary app info service reporting pod identity and labels."""
