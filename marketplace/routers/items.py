from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from marketplace.core.logging import log_event
from marketplace.core.sessions import SessionData, get_current_session, require_session
from marketplace.db.session import get_db
from marketplace.schemas.auth import MessageResponse
from marketplace.schemas.items import ItemCreate, ItemOut, ItemUpdate
from marketplace.services.catalog import CatalogService

router = APIRouter(prefix="/items", tags=["items"])
my_items_router = APIRouter(prefix="/my-items", tags=["items"])

def get_catalog(db: Session = Depends(get_db)) -> CatalogService:
	return CatalogService(db)

@router.get("", response_model=list[ItemOut])
def list_items(catalog: CatalogService = Depends(get_catalog)):
	return catalog.list_all()

@router.post("", response_model=ItemOut, status_code=201)
def create_item(
	request: Request,
	payload: ItemCreate,
	catalog: CatalogService = Depends(get_catalog),
	session: SessionData = Depends(require_session("You must be logged in to add items!")),
):
	item = catalog.create(payload, session)
	log_event("item_created", item_id=item.id, owner=item.owner, request_id=request.state.request_id)
	return item

@router.get("/{item_id}", response_model=ItemOut)
def get_item(item_id: str, catalog: CatalogService = Depends(get_catalog)):
	return catalog.get(item_id)

@router.put("/{item_id}", response_model=MessageResponse)
def update_item(
	request: Request,
	item_id: str,
	payload: ItemUpdate,
	catalog: CatalogService = Depends(get_catalog),
):
	if not catalog.update(item_id, payload):
		return {"message": f"Item with ID {item_id} found, but no changes applied (data was identical)."}

	log_event("item_updated", item_id=item_id, fields=sorted(payload.model_fields_set), request_id=request.state.request_id)
	return {"message": f"Item with ID {item_id} updated successfully!"}

@my_items_router.get("", response_model=list[ItemOut])
def list_my_items(
	catalog: CatalogService = Depends(get_catalog),
	session: Optional[SessionData] = Depends(get_current_session),
):
	return catalog.list_mine(session)

@my_items_router.delete("/{item_id}", response_model=MessageResponse)
def delete_my_item(
	request: Request,
	item_id: str,
	catalog: CatalogService = Depends(get_catalog),
	session: Optional[SessionData] = Depends(get_current_session),
):
	catalog.delete_mine(item_id, session)
	log_event("item_deleted", item_id=item_id, actor=session.username, request_id=request.state.request_id)
	return {"message": "Successfully deleted!"}
