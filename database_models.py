from sqlalchemy import Column, Integer, String, Boolean

from database import Base


class TrialRecord(Base):
    """
    Persisted trial entitlement, one row per account.
    Timestamps are kept as ISO-8601 text so a row maps field for field onto TrialData.
    """
    __tablename__ = "trials"

    user_id = Column(String, primary_key=True, index=True)
    messages_used = Column(Integer, default=0, nullable=False)
    messages_limit = Column(Integer, nullable=False)
    trial_start = Column(String, nullable=False)
    trial_end = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)
