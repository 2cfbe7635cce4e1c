"""User record request/response schemas - API contract for /json."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, model_validator

# Lower-cased JSON key -> canonical key; incoming keys match case-insensitively
_CANONICAL_KEYS = {
    key.lower(): key for key in ("User_Id", "Name", "Date_Of_Birth", "Created_On")
}

# Identifiers and timestamps are signed 64-bit on the wire
INT64_MAX = 2**63 - 1


class UserRecord(BaseModel):
    """One input record.

    Absent or null keys, and a null record, fall back to zero values, which never validate.
    """

    model_config = ConfigDict(extra="ignore")

    user_id: StrictInt = Field(0, alias="User_Id", le=INT64_MAX)
    name: StrictStr = Field("", alias="Name")
    date_of_birth: StrictStr = Field("", alias="Date_Of_Birth")
    created_on: StrictInt = Field(0, alias="Created_On", le=INT64_MAX)

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        folded = {}
        # Later duplicates win
        for key, value in data.items():
            canonical = _CANONICAL_KEYS.get(str(key).lower())
            if canonical is None or value is None:
                continue
            folded[canonical] = value
        return folded


class UserInfo(BaseModel):
    """One enriched output record. Field order is the JSON key order."""

    user_id: int = Field(serialization_alias="User_Id")
    name: str = Field(serialization_alias="Name")
    # Day of month of the date of birth, kept under its historical key name
    birth_day_of_week: int = Field(serialization_alias="Birth_Day_Of_Week")
    rfc_created_on: str = Field(serialization_alias="Rfc_Created_On")
