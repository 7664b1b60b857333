# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: mailing list CRUD. Errors propagate to the handlers in main.py."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from mailchimp_proxy.core.dependencies import get_list_service
from mailchimp_proxy.schemas import ErrorResponse, ListOut
from mailchimp_proxy.services.list_service import ListService

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}

router = APIRouter(prefix="/mailchimp", tags=["Lists"], responses=ERROR_RESPONSES)


@router.post("/lists", response_model=ListOut)
def create_list(body: Optional[Dict[str, Any]] = Body(default=None),
                service: ListService = Depends(get_list_service)):
    return service.create_list(body or {})


@router.get("/lists", response_model=List[ListOut])
def show_lists(service: ListService = Depends(get_list_service)):
    return service.get_lists()


@router.get("/lists/{list_id}", response_model=ListOut)
def show_list(list_id: str, service: ListService = Depends(get_list_service)):
    return service.get_list(list_id)


@router.put("/lists/{list_id}", response_model=ListOut)
def update_list(list_id: str, body: Optional[Dict[str, Any]] = Body(default=None),
                service: ListService = Depends(get_list_service)):
    return service.update_list(list_id, body or {})


@router.delete("/lists/{list_id}")
def remove_list(list_id: str, service: ListService = Depends(get_list_service)):
    return service.delete_list(list_id)
