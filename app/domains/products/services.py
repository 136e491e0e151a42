# app/domains/products/services.py

"""
상품(Product) 도메인의 서비스 모듈입니다.

라우터와 CRUD 사이에서 동작하며, 적용하는 규칙은 하나뿐입니다:
"수정은 해당 id의 상품이 이미 존재할 때만 수행한다".
나머지 작업은 CRUD 계층에 그대로 위임합니다.
저장소 오류는 잡지 않고 호출자에게 그대로 전파합니다.
"""

import logging
from typing import List, Optional

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from . import models, schemas
from . import crud as product_crud

logger = logging.getLogger(__name__)


class ProductService:
    """
    상품 CRUD 요청을 처리하는 서비스 클래스입니다.
    """

    def __init__(self, db: AsyncSession):
        """
        Args:
            db (AsyncSession): 요청 단위의 데이터베이스 세션.
        """
        self.db = db
        self.crud = product_crud.product

    async def get_all_products(self) -> List[models.Product]:
        return await self.crud.get_all(self.db)

    async def get_product_by_id(self, product_id: int) -> Optional[models.Product]:
        """상품을 조회합니다. 없으면 None을 반환합니다."""
        return await self.crud.get(self.db, product_id)

    async def create_product(self, product_in: schemas.ProductCreate) -> models.Product:
        """
        새 상품을 생성합니다. 본문의 id는 무시되고 저장소가 새 id를 할당합니다.
        """
        db_product = await self.crud.create(self.db, obj_in=product_in)
        logger.info("상품 생성 완료: id=%s, name=%r", db_product.id, db_product.name)
        return db_product

    async def update_product(
        self, product_id: int, product_in: schemas.ProductUpdate
    ) -> Optional[models.Product]:
        """
        존재하는 상품의 name, description, price를 교체합니다.

        Args:
            product_id (int): 수정할 상품의 ID (경로 파라미터). 본문의 id보다 우선합니다.
            product_in (schemas.ProductUpdate): 새 필드 값.

        Returns:
            Optional[models.Product]: 수정된 상품. 상품이 없으면 아무것도 쓰지 않고 None.
        """
        if product_in.id is not None and product_in.id != product_id:
            logger.debug(
                "본문의 id(%s)가 경로의 id(%s)와 다릅니다. 경로의 id를 사용합니다.",
                product_in.id, product_id,
            )

        if not await self.crud.exists(self.db, product_id):
            logger.info("수정 대상 상품이 없습니다: id=%s", product_id)
            return None

        # 존재 확인과 쓰기 사이에 삭제되었다면 replace가 None을 돌려줍니다.
        db_product = await self.crud.replace(self.db, id=product_id, obj_in=product_in)
        if db_product is None:
            logger.info("수정 도중 상품이 삭제되었습니다: id=%s", product_id)
        else:
            logger.info("상품 수정 완료: id=%s", product_id)
        return db_product

    async def delete_product(self, product_id: int) -> None:
        """상품을 삭제합니다. 상품이 없어도 성공으로 취급합니다."""
        deleted = await self.crud.delete(self.db, id=product_id)
        if deleted is None:
            logger.debug("삭제할 상품이 없습니다 (no-op): id=%s", product_id)
        else:
            logger.info("상품 삭제 완료: id=%s", product_id)


def get_product_service(db: AsyncSession = Depends(deps.get_db_session)) -> ProductService:
    """FastAPI 의존성: 요청 세션에 묶인 ProductService를 제공합니다."""
    return ProductService(db)
