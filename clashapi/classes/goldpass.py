from typing import Optional

from .common import APIModel


class GoldPassSeason(APIModel):
    startTime: Optional[str] = None
    endTime: Optional[str] = None
