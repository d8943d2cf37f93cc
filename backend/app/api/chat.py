# backend/app/api/chat.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from starlette.responses import Response

from ..database import get_db
from ..models import ChatMessage
from ..schemas.chat_message import ChatMessageCreate, ChatMessage as ChatMessageSchema
from ..utils.logging import api_logger
from .projects import get_project_or_404

router = APIRouter(prefix="/api", tags=["chat"])


@router.get("/projects/{project_id}/chat", response_model=List[ChatMessageSchema])
async def list_chat_messages(project_id: int, db: Session = Depends(get_db)):
    """Chat history of a project, oldest first"""
    api_logger.info("Fetching chat history", extra={"project_id": project_id})

    get_project_or_404(project_id, db)
    messages = db.query(ChatMessage) \
        .filter(ChatMessage.project_id == project_id) \
        .order_by(ChatMessage.created_at, ChatMessage.id) \
        .all()

    api_logger.info("Retrieved chat history", extra={
        "project_id": project_id,
        "message_count": len(messages)
    })
    return messages


@router.post(
    "/projects/{project_id}/chat",
    response_model=ChatMessageSchema,
    status_code=status.HTTP_201_CREATED
)
async def create_chat_message(project_id: int, message: ChatMessageCreate, db: Session = Depends(get_db)):
    api_logger.info("Adding chat message", extra={
        "project_id": project_id,
        "role": message.role.value
    })

    get_project_or_404(project_id, db)
    try:
        db_message = ChatMessage(
            project_id=project_id,
            role=message.role,
            content=message.content,
            message_metadata=message.metadata
        )
        db.add(db_message)
        db.commit()
        db.refresh(db_message)

        api_logger.info("Chat message stored", extra={
            "project_id": project_id,
            "message_id": db_message.id
        })
        return db_message
    except Exception as e:
        api_logger.error("Failed to store chat message", extra={
            "project_id": project_id,
            "error": str(e)
        })
        db.rollback()
        raise


@router.delete("/projects/{project_id}/chat", status_code=status.HTTP_204_NO_CONTENT)
async def clear_chat(project_id: int, db: Session = Depends(get_db)):
    api_logger.info("Clearing chat history", extra={"project_id": project_id})

    get_project_or_404(project_id, db)
    try:
        deleted = db.query(ChatMessage) \
            .filter(ChatMessage.project_id == project_id) \
            .delete(synchronize_session=False)
        db.commit()

        api_logger.info("Chat history cleared", extra={
            "project_id": project_id,
            "deleted_messages": deleted
        })
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception as e:
        db.rollback()
        api_logger.error(f"Failed to clear chat: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to clear chat")


@router.delete("/chat/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chat_message(message_id: int, db: Session = Depends(get_db)):
    api_logger.info("Deleting chat message", extra={"message_id": message_id})

    message = db.query(ChatMessage).filter(ChatMessage.id == message_id).first()
    if not message:
        api_logger.warning("Chat message not found", extra={"message_id": message_id})
        raise HTTPException(status_code=404, detail="Chat message not found")

    try:
        db.delete(message)
        db.commit()
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except Exception as e:
        db.rollback()
        api_logger.error(f"Failed to delete chat message: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to delete chat message")
