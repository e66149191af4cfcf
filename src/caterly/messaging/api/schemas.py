"""Pydantic request/response schemas for the Messaging API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from caterly.messaging.message import Message


class SendMessageRequest(BaseModel):
    recipient_id: str
    content: str = Field(..., min_length=1)


class VisitorMessageRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "sender_name": "Tobi",
                    "sender_email": "tobi@example.com",
                    "sender_phone": "+1-555-0199",
                    "recipient_id": "caterer-account-id",
                    "content": "Do you cater weddings for 150 guests?",
                }
            ]
        }
    }

    sender_name: str = Field(..., min_length=1, max_length=100)
    sender_email: str = Field(..., min_length=3, max_length=254)
    sender_phone: str | None = Field(None, max_length=30)
    recipient_id: str
    content: str = Field(..., min_length=1)


class ReplyRequest(BaseModel):
    content: str = Field(..., min_length=1)


class MessageIdResponse(BaseModel):
    message_id: str


class MessageResponse(BaseModel):
    message_id: str
    sender_id: str
    sender_type: str
    sender_name: str | None = None
    sender_email: str | None = None
    sender_phone: str | None = None
    recipient_id: str
    content: str
    read: bool
    original_message_id: str | None = None
    sent_at: datetime | None = None

    @classmethod
    def from_message(cls, message: Message) -> MessageResponse:
        return cls(
            message_id=str(message.id),
            sender_id=message.sender_id,
            sender_type=message.sender_type,
            sender_name=message.sender_name,
            sender_email=message.sender_email,
            sender_phone=message.sender_phone,
            recipient_id=str(message.recipient_id),
            content=message.content,
            read=bool(message.read),
            original_message_id=str(message.original_message_id) if message.original_message_id else None,
            sent_at=message.sent_at,
        )


class StatusResponse(BaseModel):
    status: str = "ok"
