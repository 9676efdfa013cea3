from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, StrictStr

class RegisterRequest(BaseModel):
	username: StrictStr = Field(min_length=1)
	password: StrictStr = Field(min_length=1)

class LoginRequest(BaseModel):
	username: StrictStr = Field(min_length=1)
	password: StrictStr = Field(min_length=1)

class RegisterResponse(BaseModel):
	message: str
	id: str

class MessageResponse(BaseModel):
	message: str

class UserOut(BaseModel):
	id: str
	username: str
	created_at: Optional[datetime] = None

	class Config:
		from_attributes = True
