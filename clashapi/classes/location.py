from typing import Optional

from .common import APIModel


class Location(APIModel):
    """
    A country or region used for rankings.

    ``countryCode`` is only present when ``isCountry`` is true.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    isCountry: Optional[bool] = None
    countryCode: Optional[str] = None
    localizedName: Optional[str] = None


class ChatLanguage(APIModel):
    id: Optional[int] = None
    name: Optional[str] = None
    languageCode: Optional[str] = None
