import re
from typing import Optional

_LOCATION = re.compile(r"^(?P<reason>.*?)(?: - at `(?P<path>[^`]*)`)?$", re.DOTALL)


class ClashModelError(Exception):
    """Base class for errors raised while turning a JSON document into a model."""


class MalformedInputError(ClashModelError, ValueError):
    """The input is not syntactically valid JSON."""


class TypeMismatchError(ClashModelError, TypeError):
    """
    A JSON value does not have the type declared for its field.

    Parameters
    ----------
    reason:
        :class:`str`: What was expected and what was found
    path:
        :class:`str`: Location of the offending value, e.g. ``$.troops[2].level``
    """

    def __init__(self, reason: str, path: str = "$"):
        self.reason = reason
        self.path = path
        super().__init__(f"{reason} - at `{path}`")

    @property
    def field(self) -> Optional[str]:
        """The offending field without the ``$.`` root marker, None for the root value."""
        if self.path == "$":
            return None
        return self.path[2:] if self.path.startswith("$.") else self.path[1:]

    @classmethod
    def from_validation_error(cls, exc: Exception) -> "TypeMismatchError":
        match = _LOCATION.match(str(exc))
        return cls(reason=match.group("reason"), path=match.group("path") or "$")
