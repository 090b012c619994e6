"""Redirect Target: the fixed (location, status code) pair every request is answered with.

Invariants:
    - RedirectTarget is frozen: every invocation produces the same redirect
    - location is non-empty, unpadded, and free of control characters
    - status_code is one of REDIRECT_STATUS_CODES
    - location is sent as configured (never resolved against the request URL);
      Starlette percent-encodes characters that are unsafe in a URL

Design Decisions:
    - Validation in __post_init__: an invalid target can never be constructed,
      so create_app() fails at startup instead of per request
"""

from dataclasses import dataclass

from redirector.core.errors import InvalidRedirectTargetError


DEFAULT_LOCATION: str = "index.jsp"
DEFAULT_STATUS_CODE: int = 302

# 300 (Multiple Choices) and 304 (Not Modified) carry no single target
REDIRECT_STATUS_CODES: frozenset[int] = frozenset({301, 302, 303, 307, 308})


@dataclass(frozen=True)
class RedirectTarget:
    """Where to send the client, and with which redirect status."""
    location: str = DEFAULT_LOCATION
    status_code: int = DEFAULT_STATUS_CODE

    def __post_init__(self):
        _validate_location(self.location)
        _validate_status_code(self.status_code)


def _validate_location(location: str) -> None:
    if not isinstance(location, str) or not location:
        raise InvalidRedirectTargetError("location must be a non-empty string", "location")
    if location != location.strip():
        raise InvalidRedirectTargetError(
            "location must not have leading or trailing whitespace", "location",
        )
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in location):
        raise InvalidRedirectTargetError(
            "location must not contain control characters", "location",
        )


def _validate_status_code(status_code: int) -> None:
    if status_code not in REDIRECT_STATUS_CODES:
        allowed = ", ".join(str(c) for c in sorted(REDIRECT_STATUS_CODES))
        raise InvalidRedirectTargetError(
            f"status_code {status_code!r} is not a redirect code ({allowed})",
            "status_code",
        )
