"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between services and database operations,
following the Repository pattern.
"""

from jobboard.crud import company, job, application

__all__ = ["company", "job", "application"]
