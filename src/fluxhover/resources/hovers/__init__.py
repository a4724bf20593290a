"""Hover description documents shipped as package data."""
