from typing import List, Optional

from sqlalchemy.orm import Session

from marketplace.core.errors import NotFound, ValidationError
from marketplace.core.sessions import SessionData
from marketplace.db.models import Item
from marketplace.db.session import store_guard
from marketplace.schemas.items import ItemCreate, ItemUpdate
from marketplace.services.common import check_item_id, require_username


class CatalogService:
	"""Item listings. Reads are public; creating and deleting are tied to the caller's session."""

	def __init__(self, db: Session):
		self.db = db

	def list_all(self) -> List[Item]:
		with store_guard(self.db, "retrieve items"):
			return self.db.query(Item).all()

	def create(self, payload: ItemCreate, session: Optional[SessionData]) -> Item:
		owner = require_username(session, "You must be logged in to add items!")
		item = Item(name=payload.name, price=payload.price, owner=owner)
		with store_guard(self.db, "create item"):
			self.db.add(item)
			self.db.commit()
			self.db.refresh(item)
		return item

	def get(self, item_id: str) -> Item:
		check_item_id(item_id)
		with store_guard(self.db, "retrieve item"):
			item = self.db.query(Item).filter(Item.id == item_id).first()
		if not item:
			raise NotFound("Item not found!")
		return item

	def update(self, item_id: str, payload: ItemUpdate) -> bool:
		"""Merge the supplied fields into the item.

		Any caller may update any item; only deletion is scoped to the owner.
		Returns False when every supplied value already matched.
		"""
		check_item_id(item_id)
		changes = payload.model_dump(exclude_unset=True)
		if not changes:
			raise ValidationError("Request body cannot be empty for update.")

		with store_guard(self.db, "update item"):
			item = self.db.query(Item).filter(Item.id == item_id).first()
			if not item:
				raise NotFound(f"Item with ID {item_id} not found.")

			modified = any(getattr(item, field) != value for field, value in changes.items())
			if not modified:
				return False
			for field, value in changes.items():
				setattr(item, field, value)
			self.db.commit()
		return True

	def list_mine(self, session: Optional[SessionData]) -> List[Item]:
		owner = require_username(session)
		with store_guard(self.db, "retrieve items"):
			return self.db.query(Item).filter(Item.owner == owner).all()

	def delete_mine(self, item_id: str, session: Optional[SessionData]) -> None:
		owner = require_username(session)
		check_item_id(item_id)
		# Single filtered delete: an id owned by someone else simply matches nothing.
		with store_guard(self.db, "delete item"):
			deleted = (
				self.db.query(Item)
				.filter(Item.id == item_id, Item.owner == owner)
				.delete()
			)
			self.db.commit()
		if not deleted:
			raise NotFound("Item not found or not yours.")
