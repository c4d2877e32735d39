"""Domain layer for user management.

Business rules for user records, decoupled from the HTTP presentation
and from the infrastructure that stores them.
"""
