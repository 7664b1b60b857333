# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: list member CRUD, scoped by the parent list id."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from mailchimp_proxy.core.dependencies import get_member_service
from mailchimp_proxy.schemas import ErrorResponse, MemberOut
from mailchimp_proxy.services.member_service import MemberService

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}

router = APIRouter(prefix="/mailchimp/lists/{list_id}", tags=["Members"], responses=ERROR_RESPONSES)


@router.post("/members", response_model=MemberOut)
def create_member(list_id: str, body: Optional[Dict[str, Any]] = Body(default=None),
                  service: MemberService = Depends(get_member_service)):
    return service.create_member(list_id, body or {})


@router.get("/members", response_model=List[MemberOut])
def show_members(list_id: str, service: MemberService = Depends(get_member_service)):
    return service.get_members(list_id)


@router.get("/members/{member_id}", response_model=MemberOut)
def show_member(list_id: str, member_id: str,
                service: MemberService = Depends(get_member_service)):
    return service.get_member(list_id, member_id)


@router.put("/members/{member_id}", response_model=MemberOut)
def update_member(list_id: str, member_id: str,
                  body: Optional[Dict[str, Any]] = Body(default=None),
                  service: MemberService = Depends(get_member_service)):
    return service.update_member(list_id, member_id, body or {})


@router.delete("/members/{member_id}")
def remove_member(list_id: str, member_id: str,
                  service: MemberService = Depends(get_member_service)):
    return service.delete_member(list_id, member_id)
