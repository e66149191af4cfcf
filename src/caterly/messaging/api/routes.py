"""FastAPI endpoints for messaging."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from caterly.identity.api.dependencies import current_identity
from caterly.identity.authentication import Identity
from caterly.messaging.api.schemas import (
    MessageIdResponse,
    MessageResponse,
    ReplyRequest,
    SendMessageRequest,
    StatusResponse,
    VisitorMessageRequest,
)
from caterly.messaging.conversation import (
    MarkMessageRead,
    ReplyToMessage,
    SendMessage,
    SendVisitorMessage,
    list_received,
)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", status_code=201, response_model=MessageIdResponse)
async def send_message(body: SendMessageRequest, identity: Identity = Depends(current_identity)) -> MessageIdResponse:
    command = SendMessage(sender_id=identity.identity_id, recipient_id=body.recipient_id, content=body.content)
    return MessageIdResponse(message_id=current_domain.process(command, asynchronous=False))


@router.post("/visitor", status_code=201, response_model=MessageIdResponse)
async def send_visitor_message(body: VisitorMessageRequest) -> MessageIdResponse:
    command = SendVisitorMessage(
        sender_name=body.sender_name,
        sender_email=body.sender_email,
        sender_phone=body.sender_phone,
        recipient_id=body.recipient_id,
        content=body.content,
    )
    return MessageIdResponse(message_id=current_domain.process(command, asynchronous=False))


@router.get("/received", response_model=list[MessageResponse])
async def received_messages(identity: Identity = Depends(current_identity)) -> list[MessageResponse]:
    return [MessageResponse.from_message(message) for message in list_received(identity.identity_id)]


@router.put("/{message_id}/read", response_model=StatusResponse)
async def mark_read(message_id: str, identity: Identity = Depends(current_identity)) -> StatusResponse:
    current_domain.process(MarkMessageRead(message_id=message_id, reader_id=identity.identity_id), asynchronous=False)
    return StatusResponse()


@router.post("/{message_id}/reply", status_code=201, response_model=MessageIdResponse)
async def reply(message_id: str, body: ReplyRequest, identity: Identity = Depends(current_identity)) -> MessageIdResponse:
    command = ReplyToMessage(message_id=message_id, responder_id=identity.identity_id, content=body.content)
    return MessageIdResponse(message_id=current_domain.process(command, asynchronous=False))
