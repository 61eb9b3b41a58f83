"""
Contact routes: GET /, POST /, GET /{id}, PUT /{id}, DELETE /{id}

Every route requires a bearer token and only touches the caller's contacts.
"""

from typing import List

from fastapi import APIRouter, Depends

from contacts_api.contracts import (
    ContactCreate,
    ContactResponse,
    ContactUpdate,
    CurrentUser,
)
from contacts_api.dependencies.auth import get_current_user
from contacts_api.dependencies.services import get_contact_service
from contacts_api.services.contacts import ContactService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[ContactResponse])
async def list_contacts(
    user: CurrentUser = Depends(get_current_user),
    service: ContactService = Depends(get_contact_service),
):
    return await service.list_for(user)


@router.post("", response_model=ContactResponse, status_code=201)
async def create_contact(
    payload: ContactCreate,
    user: CurrentUser = Depends(get_current_user),
    service: ContactService = Depends(get_contact_service),
):
    return await service.create(user, payload)


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: ContactService = Depends(get_contact_service),
):
    return await service.get(user, contact_id)


@router.put("/{contact_id}", response_model=ContactResponse)
async def update_contact(
    contact_id: str,
    payload: ContactUpdate,
    user: CurrentUser = Depends(get_current_user),
    service: ContactService = Depends(get_contact_service),
):
    return await service.update(user, contact_id, payload)


@router.delete("/{contact_id}", response_model=ContactResponse)
async def delete_contact(
    contact_id: str,
    user: CurrentUser = Depends(get_current_user),
    service: ContactService = Depends(get_contact_service),
):
    """Delete the contact and return it as it was."""
    return await service.delete(user, contact_id)
