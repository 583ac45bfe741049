import uuid

from sqlalchemy import Column, String, DateTime, JSON

from .base import Base


class RecJob(Base):
    __tablename__ = "rec_jobs"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    role = Column(String, nullable=False)
    company = Column(String)
    location = Column(String)
    salary_range = Column(String)
    apply_url = Column(String)
    posting_date = Column(DateTime, index=True)
    source_site = Column(String)
    job_type = Column(String)
    required_skills = Column(JSON)
