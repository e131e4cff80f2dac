"""Textual widgets and screens for the naturaltime explorer."""
