"""Typed models for the Clash of Clans API."""

from clashapi.classes import *  # noqa: F401,F403
from clashapi.client import ClashClient
from clashapi.utility.decoding import decode, encode, to_builtins
from clashapi.utility.errors import ClashModelError, MalformedInputError, TypeMismatchError

__version__ = "1.0.0"
