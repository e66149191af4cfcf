"""Message aggregate: a note from a buyer, caterer or visitor to an account."""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, Text

from caterly.domain import caterly
from caterly.messaging.events import MessageRead, MessageSent


class SenderType(Enum):
    USER = "user"
    CATERER = "caterer"
    VISITOR = "visitor"


@caterly.aggregate
class Message:
    sender_id: String(required=True, max_length=254)  # account id, or a visitor's email
    sender_type: String(required=True, choices=SenderType)
    sender_name: String(max_length=100)
    sender_email: String(max_length=254)
    sender_phone: String(max_length=30)
    recipient_id: Identifier(required=True)
    content: Text(required=True)
    read: Boolean(default=False)
    original_message_id: Identifier()
    sent_at: DateTime()

    @classmethod
    def send(
        cls,
        sender_id,
        sender_type,
        recipient_id,
        content,
        sender_name=None,
        sender_email=None,
        sender_phone=None,
        original_message_id=None,
    ):
        if not content or not content.strip():
            raise ValidationError({"content": ["Message content is required"]})
        if sender_type == SenderType.VISITOR.value and not (sender_name and sender_email):
            raise ValidationError({"sender": ["Visitors must give a name and an email"]})

        now = datetime.now(UTC)
        message = cls(
            sender_id=str(sender_id),
            sender_type=sender_type,
            sender_name=sender_name,
            sender_email=sender_email,
            sender_phone=sender_phone,
            recipient_id=str(recipient_id),
            content=content,
            read=False,
            original_message_id=original_message_id,
            sent_at=now,
        )
        message.raise_(
            MessageSent(
                message_id=str(message.id),
                sender_id=str(sender_id),
                sender_type=sender_type,
                recipient_id=str(recipient_id),
                original_message_id=original_message_id,
                sent_at=now,
            )
        )
        return message

    @property
    def from_visitor(self) -> bool:
        return self.sender_type == SenderType.VISITOR.value

    def is_addressed_to(self, identity_id) -> bool:
        return str(self.recipient_id) == str(identity_id)

    def mark_read(self):
        if self.read:
            return
        self.read = True
        self.raise_(MessageRead(message_id=str(self.id), recipient_id=str(self.recipient_id)))
