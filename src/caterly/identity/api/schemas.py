"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from caterly.identity.account import Account

# --- Request Schemas ---


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "Mama Rosa",
                    "phone": "+1-555-0100",
                    "password": "s3cret-pass",
                    "role": "caterer",
                    "business_name": "Rosa's Kitchen",
                    "business_address": "12 Market Street, Springfield",
                }
            ]
        }
    }

    username: str = Field(..., max_length=100)
    phone: str = Field(..., max_length=30)
    password: str = Field(..., min_length=6)
    role: str = Field("user", pattern="^(user|caterer)$")
    business_name: str | None = Field(None, max_length=200)
    business_address: str | None = Field(None, max_length=500)


class LoginRequest(BaseModel):
    phone: str
    password: str


# --- Response Schemas ---


class AccountResponse(BaseModel):
    account_id: str
    username: str
    phone: str
    role: str
    business_name: str | None = None
    business_address: str | None = None
    registered_at: datetime | None = None

    @classmethod
    def from_account(cls, account: Account) -> AccountResponse:
        profile = account.caterer_profile
        return cls(
            account_id=str(account.id),
            username=account.username,
            phone=account.phone,
            role=account.role,
            business_name=profile.business_name if profile else None,
            business_address=profile.business_address if profile else None,
            registered_at=account.registered_at,
        )


class RegisterResponse(BaseModel):
    account_id: str


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    account: AccountResponse


class StatusResponse(BaseModel):
    status: str = "ok"
