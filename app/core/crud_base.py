# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 세션을 사용하며, 각 쓰기 작업은 자신의 트랜잭션을 커밋합니다.
비즈니스 로직은 두지 않고 저장소 작업만 감쌉니다.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from sqlalchemy import func
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

# 기본 키 컬럼(BIGINT / SQLite INTEGER)이 담을 수 있는 범위
ID_MIN = -(2 ** 63)
ID_MAX = 2 ** 63 - 1


def is_storable_id(id: Any) -> bool:
    """정수 id가 기본 키 컬럼 범위 안에 있는지 확인합니다. 범위 밖의 id는 존재할 수 없습니다."""
    if isinstance(id, int) and not isinstance(id, bool):
        return ID_MIN <= id <= ID_MAX
    return True


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    기본 키 컬럼의 이름은 `id`라고 가정합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    @staticmethod
    def _to_dict(obj_in: Union[BaseModel, Dict[str, Any]], **dump_kwargs: Any) -> Dict[str, Any]:
        if isinstance(obj_in, dict):
            exclude = dump_kwargs.get("exclude") or set()
            return {key: value for key, value in obj_in.items() if key not in exclude}
        return obj_in.model_dump(**dump_kwargs)

    async def get_all(self, db: AsyncSession) -> List[ModelType]:
        """
        모든 레코드를 조회합니다. 정렬은 저장소 기본 순서를 따릅니다.
        """
        result = await db.execute(select(self.model))
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다. 레코드가 없으면 None을 반환합니다.
        컬럼 범위를 벗어난 id도 '없음'으로 취급합니다.
        """
        if not is_storable_id(id):
            return None
        return await db.get(self.model, id)

    async def exists(self, db: AsyncSession, id: Any) -> bool:
        """ID에 해당하는 레코드가 현재 존재하는지 확인합니다."""
        if not is_storable_id(id):
            return False
        statement = select(self.model.id).where(self.model.id == id)
        result = await db.execute(statement)
        return result.scalar_one_or_none() is not None

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        입력에 id가 있더라도 무시하고, id는 저장소가 할당합니다.
        """
        db_obj = self.model.model_validate(self._to_dict(obj_in, exclude={"id"}))
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def replace(
        self, db: AsyncSession, *, id: Any, obj_in: UpdateSchemaType
    ) -> Optional[ModelType]:
        """
        기존 레코드의 모든 변경 가능 필드를 덮어씁니다. id는 바뀌지 않습니다.
        해당 id의 레코드가 없으면 아무것도 쓰지 않고 None을 반환합니다.
        """
        db_obj = await self.get(db, id)
        if db_obj is None:
            return None

        for key, value in self._to_dict(obj_in, exclude={"id"}).items():
            setattr(db_obj, key, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def save(
        self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        upsert 방식으로 저장합니다.
        - id가 없으면 새 레코드를 생성하고 저장소가 id를 할당합니다.
        - id가 있으면 해당 레코드를 덮어쓰고, 없으면 그 id로 새로 생성합니다.

        id를 지정해 새로 생성하면 PostgreSQL의 id 시퀀스가 전진하지 않으므로,
        이후 create()가 같은 id를 받지 않도록 시퀀스를 현재 최대 id로 맞춥니다.
        """
        data = self._to_dict(obj_in)
        obj_id = data.get("id")

        db_obj = await self.get(db, obj_id) if obj_id is not None else None
        inserted_with_id = False
        if db_obj is None:
            if obj_id is None:
                data.pop("id", None)
            else:
                inserted_with_id = True
            db_obj = self.model.model_validate(data)
        else:
            for key, value in data.items():
                if key != "id":
                    setattr(db_obj, key, value)

        db.add(db_obj)
        await db.commit()
        if inserted_with_id:
            await self._sync_id_sequence(db)
        await db.refresh(db_obj)
        return db_obj

    async def _sync_id_sequence(self, db: AsyncSession) -> None:
        # SQLite는 rowid가 항상 최대값 다음을 할당하므로 PostgreSQL만 처리합니다.
        if db.bind is None or db.bind.dialect.name != "postgresql":
            return
        table = self.model.__table__
        statement = select(
            func.setval(
                func.pg_get_serial_sequence(table.fullname, "id"),
                select(func.max(table.c.id)).scalar_subquery(),
            )
        )
        await db.execute(statement)
        await db.commit()

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 레코드를 삭제합니다.
        레코드가 없으면 아무 일도 하지 않고 None을 반환합니다.
        """
        db_obj = await self.get(db, id)
        if db_obj:
            await db.delete(db_obj)
            await db.commit()
        return db_obj
