from sqlalchemy import Column, String, Float, DateTime, JSON, func

from .base import Base


class RecProfile(Base):
    """Stored student profile read by the stream-based flows."""
    __tablename__ = "rec_profiles"

    id = Column(String, primary_key=True)
    full_name = Column(String)
    current_course = Column(String)
    study_area = Column(String)
    current_study_level = Column(String)
    class_level = Column(String)
    target_course_interest = Column(JSON)
    interests = Column(JSON)
    preferred_state = Column(String)
    preferred_district = Column(String)

    logical_score = Column(Float)
    numerical_score = Column(Float)
    technical_score = Column(Float)
    verbal_score = Column(Float)
    creative_score = Column(Float)
    overall_score = Column(Float)

    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
