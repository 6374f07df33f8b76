"""User interfaces for httpconv."""
