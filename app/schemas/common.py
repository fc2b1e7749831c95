# schemas/common.py
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel

from app.core.day_boundary import ensure_utc


# SQLite hands timestamps back without tzinfo; they are always stored as UTC.
UTCDateTime = Annotated[datetime, AfterValidator(ensure_utc)]


class SuccessResponse(BaseModel):
    success: bool = True
