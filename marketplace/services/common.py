from typing import Optional

from marketplace.core.errors import AuthRequired, ValidationError
from marketplace.core.sessions import SessionData
from marketplace.db.models import is_valid_id

def require_username(session: Optional[SessionData], message: str = "You need to login first!") -> str:
	if session is None or not session.username:
		raise AuthRequired(message)
	return session.username

def check_item_id(item_id: str) -> str:
	if not is_valid_id(item_id):
		raise ValidationError("Invalid item ID format.")
	return item_id
