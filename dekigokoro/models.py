"""Pydantic models for Dekigokoro API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_serializer

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1


class PlayerCurrency(BaseModel):
    """A player's balance for one currency key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    player_id: int = Field(alias="playerId", ge=0, le=UINT64_MAX)
    balance: int = Field(ge=INT64_MIN, le=INT64_MAX)
    sub_key: str | None = Field(default=None, alias="subKey")


class PlayerCurrencyRanked(PlayerCurrency):
    """One leaderboard row: a balance plus its rank position."""

    rank: int


class SetBalanceRequest(BaseModel):
    """Body of a PUT to a currency endpoint."""

    model_config = ConfigDict(frozen=True)

    balance: int = Field(ge=INT64_MIN, le=INT64_MAX, strict=True)

    # Serialized as decimal text, never a JSON number
    @field_serializer("balance")
    def serialize_balance(self, value: int) -> str:
        return str(value)


class ChangeBalanceRequest(BaseModel):
    """Body of a PATCH to a currency endpoint."""

    model_config = ConfigDict(frozen=True)

    increment: int = Field(ge=INT64_MIN, le=INT64_MAX, strict=True)

    @field_serializer("increment")
    def serialize_increment(self, value: int) -> str:
        return str(value)
