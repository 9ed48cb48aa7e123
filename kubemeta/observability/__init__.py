"""Logging and metrics for kubemeta."""
