"""Core reconciliation, preflight and configuration logic for brewctl."""
