"""Infrastructure layer module.

Configuration, logging setup and database session management.
"""
