"""User domain module.

This domain manages user records (username and email) and the
bearer-token authentication that gates access to them.
"""
