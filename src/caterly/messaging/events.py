"""Domain events for the Message aggregate."""

from protean.fields import DateTime, Identifier, String

from caterly.domain import caterly


@caterly.event(part_of="Message")
class MessageSent:
    __version__ = 1

    message_id: Identifier(required=True)
    sender_id: String(required=True)
    sender_type: String(required=True)
    recipient_id: Identifier(required=True)
    original_message_id: Identifier()
    sent_at: DateTime(required=True)


@caterly.event(part_of="Message")
class MessageRead:
    __version__ = 1

    message_id: Identifier(required=True)
    recipient_id: Identifier(required=True)
