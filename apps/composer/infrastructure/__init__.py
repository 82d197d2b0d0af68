"""Composer Infrastructure Layer."""
