"""Messaging commands: send, visitor send, mark read and reply."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from caterly.domain import caterly
from caterly.exceptions import PermissionDenied
from caterly.identity.account import Account
from caterly.messaging.message import Message, SenderType

logger = structlog.get_logger(__name__)


@caterly.command(part_of="Message")
class SendMessage:
    """Message from a signed-in account; name and phone come from the account."""

    sender_id: Identifier(required=True)
    recipient_id: Identifier(required=True)
    content: Text(required=True)


@caterly.command(part_of="Message")
class SendVisitorMessage:
    sender_name: String(required=True, max_length=100)
    sender_email: String(required=True, max_length=254)
    sender_phone: String(max_length=30)
    recipient_id: Identifier(required=True)
    content: Text(required=True)


@caterly.command(part_of="Message")
class MarkMessageRead:
    message_id: Identifier(required=True)
    reader_id: Identifier(required=True)


@caterly.command(part_of="Message")
class ReplyToMessage:
    message_id: Identifier(required=True)
    responder_id: Identifier(required=True)
    content: Text(required=True)


def _recipient(recipient_id) -> Account:
    try:
        return current_domain.repository_for(Account).get(recipient_id)
    except ObjectNotFoundError:
        raise ObjectNotFoundError(f"Recipient {recipient_id} does not exist") from None


@caterly.command_handler(part_of=Message)
class ConversationHandler:
    @handle(SendMessage)
    def send_message(self, command):
        sender = current_domain.repository_for(Account).get(command.sender_id)
        _recipient(command.recipient_id)

        message = Message.send(
            sender_id=str(sender.id),
            sender_type=sender.role,
            sender_name=sender.username,
            sender_phone=sender.phone,
            recipient_id=command.recipient_id,
            content=command.content,
        )
        current_domain.repository_for(Message).add(message)
        return str(message.id)

    @handle(SendVisitorMessage)
    def send_visitor_message(self, command):
        recipient = _recipient(command.recipient_id)
        if not recipient.is_caterer:
            raise PermissionDenied("Visitors can only message caterers")

        message = Message.send(
            sender_id=command.sender_email,
            sender_type=SenderType.VISITOR.value,
            sender_name=command.sender_name,
            sender_email=command.sender_email,
            sender_phone=command.sender_phone,
            recipient_id=command.recipient_id,
            content=command.content,
        )
        current_domain.repository_for(Message).add(message)
        logger.info("Visitor message received", message_id=str(message.id), recipient_id=command.recipient_id)
        return str(message.id)

    @handle(MarkMessageRead)
    def mark_message_read(self, command):
        repo = current_domain.repository_for(Message)
        message = repo.get(command.message_id)
        if not message.is_addressed_to(command.reader_id):
            raise PermissionDenied("You can only mark your own messages as read")

        message.mark_read()
        repo.add(message)

    @handle(ReplyToMessage)
    def reply_to_message(self, command):
        repo = current_domain.repository_for(Message)
        original = repo.get(command.message_id)
        if not original.is_addressed_to(command.responder_id):
            raise PermissionDenied("You can only reply to messages sent to you")
        if original.from_visitor:
            raise PermissionDenied("Visitor messages cannot be replied to in the app")

        responder = current_domain.repository_for(Account).get(command.responder_id)
        reply = Message.send(
            sender_id=str(responder.id),
            sender_type=responder.role,
            sender_name=responder.username,
            sender_phone=responder.phone,
            recipient_id=original.sender_id,
            content=command.content,
            original_message_id=str(original.id),
        )
        repo.add(reply)
        return str(reply.id)


def list_received(identity_id) -> list[Message]:
    """Messages addressed to ``identity_id``, newest first."""
    repo = current_domain.repository_for(Message)
    messages = repo._dao.query.filter(recipient_id=str(identity_id)).limit(None).all().items
    return sorted(messages, key=lambda message: message.sent_at, reverse=True)
