"""
Generic async CRUD service base class.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from beanie import PydanticObjectId
from bson import ObjectId

from contacts_api.models import TimestampedDocument

ModelType = TypeVar("ModelType", bound=TimestampedDocument)


def parse_object_id(value: Any) -> Optional[PydanticObjectId]:
    """Return ``value`` as an ObjectId, or None if it is not one."""
    if isinstance(value, ObjectId):
        return PydanticObjectId(value)
    if isinstance(value, str) and ObjectId.is_valid(value):
        return PydanticObjectId(value)
    return None


class CRUDBase(Generic[ModelType]):
    """
    Reusable async CRUD operations for any beanie document.

    Usage::

        crud = CRUDBase(Contact)
        item = await crud.get(some_id)
        items = await crud.get_multi(filters={"user_id": owner_id})
    """

    def __init__(self, model: Type[ModelType]) -> None:
        self.model = model

    async def get(self, id: Any) -> Optional[ModelType]:
        object_id = parse_object_id(id)
        if object_id is None:
            return None
        return await self.model.get(object_id)

    async def get_multi(
        self,
        filters: Optional[Dict[str, Any]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
        order_by: str = "created_at",
        order_desc: bool = False,
    ) -> List[ModelType]:
        query = {
            key: value
            for key, value in (filters or {}).items()
            if key in self.model.model_fields
        }
        sort = f"-{order_by}" if order_desc else f"+{order_by}"
        cursor = self.model.find(query).sort(sort).skip(skip)
        if limit is not None:
            cursor = cursor.limit(limit)
        return await cursor.to_list()

    async def find_one(self, filters: Dict[str, Any]) -> Optional[ModelType]:
        return await self.model.find_one(filters)

    async def create(self, obj_in: Dict[str, Any]) -> ModelType:
        db_obj = self.model(**obj_in)
        await db_obj.insert()
        return db_obj

    async def update(self, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        for key, value in obj_in.items():
            if key in self.model.model_fields:
                setattr(db_obj, key, value)
        await db_obj.save()
        return db_obj

    async def delete(self, db_obj: ModelType) -> ModelType:
        await db_obj.delete()
        return db_obj

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return await self.model.find(filters or {}).count()
