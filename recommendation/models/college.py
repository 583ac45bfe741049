import uuid

from sqlalchemy import Column, String, Float, Boolean, DateTime, JSON, func

from .base import Base


class RecCollege(Base):
    __tablename__ = "rec_colleges"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    college_name = Column(String)
    state = Column(String, index=True)
    district = Column(String)
    specialised_in = Column(String)
    college_type = Column(String)
    courses_offered = Column(JSON)  # list of course names
    rating = Column(Float)
    fees = Column(Float)
    website = Column(String)
    admission_link = Column(String)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, server_default=func.now())
