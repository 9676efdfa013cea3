from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from marketplace.core.config import settings
from marketplace.core.errors import AuthRequired
from marketplace.core.logging import log_event
from marketplace.core.sessions import SessionData, SessionStore, get_current_session, get_session_store
from marketplace.db.session import get_db
from marketplace.schemas.auth import LoginRequest, MessageResponse, RegisterRequest, RegisterResponse
from marketplace.services.identity import IdentityService

router = APIRouter(tags=["auth"])

def get_identity(
	db: Session = Depends(get_db),
	store: SessionStore = Depends(get_session_store),
) -> IdentityService:
	return IdentityService(db, store)

def set_session_cookie(response: Response, token: str) -> None:
	response.set_cookie(
		settings.SESSION_COOKIE_NAME,
		token,
		httponly=True,
		samesite="lax",
		secure=settings.SESSION_COOKIE_SECURE,
	)

def clear_session_cookie(response: Response) -> None:
	response.delete_cookie(settings.SESSION_COOKIE_NAME)

@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(request: Request, payload: RegisterRequest, identity: IdentityService = Depends(get_identity)):
	user = identity.register(payload)
	log_event("user_registered", username=user.username, request_id=request.state.request_id)
	return {"message": "User added", "id": user.id}

@router.post("/login", response_model=MessageResponse)
def login(
	request: Request,
	response: Response,
	payload: LoginRequest,
	identity: IdentityService = Depends(get_identity),
	session: Optional[SessionData] = Depends(get_current_session),
):
	try:
		new_session = identity.login(payload, session)
	except AuthRequired:
		log_event("user_login_failed", username=payload.username, request_id=request.state.request_id)
		raise

	set_session_cookie(response, new_session.token)
	log_event("user_login", username=new_session.username, request_id=request.state.request_id)
	return {"message": "You have logged in!"}

@router.post("/logout", response_model=MessageResponse)
def logout(
	request: Request,
	response: Response,
	identity: IdentityService = Depends(get_identity),
	session: Optional[SessionData] = Depends(get_current_session),
):
	identity.logout(session)
	clear_session_cookie(response)
	log_event("user_logout", username=session.username if session else None, request_id=request.state.request_id)
	return {"message": "Logout successful!"}
