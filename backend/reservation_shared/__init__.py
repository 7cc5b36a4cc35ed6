"""
Shared infrastructure for the reservation backend:
configuration, logging, database sessions, security and error types.
"""
