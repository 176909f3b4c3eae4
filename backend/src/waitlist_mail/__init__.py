"""Waitlist back-in-stock email rendering."""
