"""URL path construction for API endpoints."""

from urllib.parse import quote

from .exceptions import InvalidArgumentError
from .models import UINT64_MAX


def encode_segment(segment: str) -> str:
    """Percent-encode one path segment, including any '/'."""
    return quote(segment, safe="")


def build_path(*segments: str | int) -> str:
    """Join segments into a relative path, encoding each one."""
    return "/".join(encode_segment(str(segment)) for segment in segments)


def require_int(name: str, value: object) -> None:
    """Reject anything but a real int (bools included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}."
        )


def _check_sub_key(sub_key: str | None) -> None:
    if sub_key is not None and sub_key == "":
        raise InvalidArgumentError("Sub key must not be empty.")


def currency_path(player_id: int, sub_key: str | None = None) -> str:
    """Path for a player's balance, e.g. ``currency/123/gems``."""
    require_int("Player ID", player_id)
    if player_id < 0 or player_id > UINT64_MAX:
        raise InvalidArgumentError(
            f"Player ID must be an unsigned 64-bit integer, got {player_id}."
        )
    _check_sub_key(sub_key)

    if sub_key is not None:
        return build_path("currency", player_id, sub_key)
    return build_path("currency", player_id)


def rankings_path(sub_key: str | None = None) -> str:
    """Path for the currency leaderboard, e.g. ``currency/rankings/gems``."""
    _check_sub_key(sub_key)

    if sub_key is not None:
        return build_path("currency", "rankings", sub_key)
    return build_path("currency", "rankings")
