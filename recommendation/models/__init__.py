# Export all recommendation models for easy imports
from .base import Base
from .college import RecCollege
from .scholarship import RecScholarship
from .job import RecJob
from .profile import RecProfile

__all__ = [
    "Base",
    "RecCollege",
    "RecScholarship",
    "RecJob",
    "RecProfile",
]
