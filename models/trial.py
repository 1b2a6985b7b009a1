from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TrialState(BaseModel):
    """Runtime view of a trial. Builders must keep messagesRemaining <= totalMessages."""
    messagesRemaining: int
    totalMessages: int
    trialEndDate: datetime
    isTrialActive: bool


class TrialData(BaseModel):
    """Stored/wire view of a trial, timestamps as ISO-8601 text."""
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    messages_used: int
    messages_limit: int
    trial_start: str
    trial_end: str
    is_active: bool
    created_at: str
    updated_at: str
