from typing import Optional

from pydantic import BaseModel, Field, StrictFloat, StrictStr, field_validator

# StrictFloat takes JSON integers but refuses booleans and numeric strings.
Price = StrictFloat

class ItemCreate(BaseModel):
	name: StrictStr = Field(min_length=1)
	price: Price = Field(gt=0, allow_inf_nan=False)

class ItemUpdate(BaseModel):
	name: Optional[StrictStr] = Field(default=None, min_length=1)
	price: Optional[Price] = Field(default=None, gt=0, allow_inf_nan=False)

	@field_validator("name", "price")
	@classmethod
	def not_null(cls, v):
		# Only runs for supplied values, so an absent field is never checked.
		if v is None:
			raise ValueError("Field cannot be null if provided")
		return v

	class Config:
		extra = "forbid"

class ItemOut(BaseModel):
	id: str
	name: str
	price: float
	owner: str

	class Config:
		from_attributes = True
