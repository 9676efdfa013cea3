from typing import Optional

from fastapi import APIRouter, Depends, Request, Response

from marketplace.core.logging import log_event
from marketplace.core.sessions import SessionData, get_current_session
from marketplace.routers.auth import clear_session_cookie, get_identity
from marketplace.schemas.auth import MessageResponse, UserOut
from marketplace.services.identity import IdentityService

router = APIRouter(prefix="/profile", tags=["users"])

@router.get("", response_model=UserOut)
def get_profile(
	identity: IdentityService = Depends(get_identity),
	session: Optional[SessionData] = Depends(get_current_session),
):
	return identity.get_profile(session)

@router.delete("", response_model=MessageResponse)
def delete_profile(
	request: Request,
	response: Response,
	identity: IdentityService = Depends(get_identity),
	session: Optional[SessionData] = Depends(get_current_session),
):
	identity.delete_account(session)
	clear_session_cookie(response)
	log_event("user_deleted", username=session.username, request_id=request.state.request_id)
	return {"message": "Your account has been deleted!"}
