"""
Database models package.
"""

from jobboard.models.company import Company
from jobboard.models.job import Job, JobStatus
from jobboard.models.application import Application

__all__ = ["Company", "Job", "JobStatus", "Application"]
