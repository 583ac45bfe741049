import uuid

from sqlalchemy import Column, String, Text, DateTime, JSON, func

from .base import Base


class RecScholarship(Base):
    __tablename__ = "rec_scholarships"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    provider = Column(String)
    eligibility_summary = Column(Text)
    amount = Column(String)
    deadline = Column(String)  # ISO date as published by the provider
    apply_url = Column(String)
    official_domain = Column(String)
    required_documents = Column(JSON)
    target_locations = Column(JSON)
    target_academic_level = Column(JSON)
    status = Column(String, default="open")  # open / closed
    last_checked = Column(DateTime, server_default=func.now())
