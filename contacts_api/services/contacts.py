"""
Contact CRUD scoped to the authenticated owner.
"""

import logging
from typing import List

from contacts_api.contracts import ContactCreate, ContactUpdate, CurrentUser
from contacts_api.core.errors import Forbidden, NotFound, ValidationFailed
from contacts_api.models import Contact
from contacts_api.services.crud import CRUDBase, parse_object_id

logger = logging.getLogger(__name__)


class ContactService:
    def __init__(self) -> None:
        self.crud = CRUDBase(Contact)

    async def list_for(self, caller: CurrentUser) -> List[Contact]:
        return await self.crud.get_multi(filters={"user_id": parse_object_id(caller.id)})

    async def create(self, caller: CurrentUser, payload: ContactCreate) -> Contact:
        if not all([payload.name, payload.email, payload.phone]):
            raise ValidationFailed("All fields are mandatory!")
        data = payload.model_dump()
        data["user_id"] = parse_object_id(caller.id)
        return await self.crud.create(data)

    async def get(self, caller: CurrentUser, contact_id: str) -> Contact:
        return await self._get_owned(caller, contact_id, "view")

    async def update(self, caller: CurrentUser, contact_id: str, payload: ContactUpdate) -> Contact:
        contact = await self._get_owned(caller, contact_id, "update")
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        return await self.crud.update(contact, changes)

    async def delete(self, caller: CurrentUser, contact_id: str) -> Contact:
        contact = await self._get_owned(caller, contact_id, "delete")
        await self.crud.delete(contact)
        logger.info("Deleted contact %s for user %s", contact_id, caller.id)
        return contact

    async def _get_owned(self, caller: CurrentUser, contact_id: str, action: str) -> Contact:
        contact = await self.crud.get(contact_id)
        if contact is None:
            raise NotFound("Contact not found")
        if str(contact.user_id) != caller.id:
            logger.warning(
                "User %s tried to %s contact %s owned by %s",
                caller.id, action, contact_id, contact.user_id,
            )
            raise Forbidden(f"User don't have permission to {action} other user contacts")
        return contact
