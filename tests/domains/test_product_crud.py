# tests/domains/test_product_crud.py

"""
'products' 테이블 CRUD 계층(app.domains.products.crud)에 대한 테스트입니다.
"""

from decimal import Decimal

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from app.domains.products import models as product_models
from app.domains.products import schemas as product_schemas
from app.domains.products.crud import product as product_crud


def _product_in(**overrides) -> product_schemas.ProductCreate:
    data = {"name": "Product 1", "description": "Product description", "price": Decimal("19.99")}
    data.update(overrides)
    return product_schemas.ProductCreate(**data)


@pytest.mark.asyncio
async def test_get_all_empty(db_session: AsyncSession):
    assert await product_crud.get_all(db_session) == []


@pytest.mark.asyncio
async def test_create_assigns_id_and_ignores_input_id(
    db_session: AsyncSession, sample_product: product_models.Product
):
    """입력의 id는 무시되고 저장소가 새 id를 할당하는지 테스트합니다."""
    created = await product_crud.create(db_session, obj_in=_product_in(id=sample_product.id))

    assert created.id is not None
    assert created.id != sample_product.id
    assert len(await product_crud.get_all(db_session)) == 2


@pytest.mark.asyncio
async def test_get_and_exists(db_session: AsyncSession, sample_product: product_models.Product):
    found = await product_crud.get(db_session, sample_product.id)

    assert found is not None
    assert found.name == "Product 1"
    assert await product_crud.exists(db_session, sample_product.id) is True
    assert await product_crud.get(db_session, 999999) is None
    assert await product_crud.exists(db_session, 999999) is False


@pytest.mark.asyncio
async def test_replace_existing_keeps_id(db_session: AsyncSession, sample_product: product_models.Product):
    replaced = await product_crud.replace(
        db_session,
        id=sample_product.id,
        obj_in=product_schemas.ProductUpdate(
            id=12345, name="Renamed", description="New description", price=Decimal("5.00")
        ),
    )

    assert replaced is not None
    assert replaced.id == sample_product.id
    assert replaced.name == "Renamed"
    assert replaced.description == "New description"
    assert replaced.price == Decimal("5.00")
    assert await product_crud.exists(db_session, 12345) is False


@pytest.mark.asyncio
async def test_replace_missing_returns_none(db_session: AsyncSession):
    replaced = await product_crud.replace(
        db_session,
        id=424242,
        obj_in=product_schemas.ProductUpdate(name="x", description="y", price=Decimal("1.00")),
    )

    assert replaced is None
    assert await product_crud.get_all(db_session) == []


@pytest.mark.asyncio
async def test_save_without_id_inserts(db_session: AsyncSession):
    saved = await product_crud.save(db_session, obj_in=_product_in())

    assert saved.id is not None
    assert await product_crud.exists(db_session, saved.id)


@pytest.mark.asyncio
async def test_save_with_existing_id_overwrites(
    db_session: AsyncSession, sample_product: product_models.Product
):
    saved = await product_crud.save(
        db_session,
        obj_in={"id": sample_product.id, "name": "Overwritten", "description": "d", "price": Decimal("2.50")},
    )

    assert saved.id == sample_product.id
    assert saved.name == "Overwritten"
    assert len(await product_crud.get_all(db_session)) == 1


@pytest.mark.asyncio
async def test_delete_existing_and_missing(db_session: AsyncSession, sample_product: product_models.Product):
    deleted = await product_crud.delete(db_session, id=sample_product.id)

    assert deleted is not None
    assert await product_crud.get(db_session, sample_product.id) is None
    # 없는 레코드 삭제는 오류 없이 None을 반환합니다.
    assert await product_crud.delete(db_session, id=sample_product.id) is None


@pytest.mark.asyncio
async def test_save_with_new_explicit_id_then_create_gets_fresh_id(db_session: AsyncSession):
    """id를 지정해 upsert로 생성한 뒤에도 create는 겹치지 않는 새 id를 받는지 테스트합니다."""
    saved = await product_crud.save(
        db_session,
        obj_in={"id": 500, "name": "Imported", "description": "d", "price": Decimal("1.00")},
    )
    created = await product_crud.create(db_session, obj_in=_product_in())

    assert saved.id == 500
    assert created.id is not None
    assert created.id != 500
    assert len(await product_crud.get_all(db_session)) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("out_of_range_id", [2 ** 63, 10 ** 20, -(2 ** 63) - 1])
async def test_out_of_range_id_is_absent(
    db_session: AsyncSession, sample_product: product_models.Product, out_of_range_id: int
):
    """기본 키 컬럼 범위를 벗어난 id는 오류 없이 '없음'으로 처리되는지 테스트합니다."""
    assert await product_crud.get(db_session, out_of_range_id) is None
    assert await product_crud.exists(db_session, out_of_range_id) is False
    assert await product_crud.delete(db_session, id=out_of_range_id) is None
    replaced = await product_crud.replace(
        db_session,
        id=out_of_range_id,
        obj_in=product_schemas.ProductUpdate(name="x", description="y", price=Decimal("1.00")),
    )
    assert replaced is None
    assert len(await product_crud.get_all(db_session)) == 1


@pytest.mark.asyncio
async def test_id_column_holds_bigint_values(db_session: AsyncSession):
    """32비트 범위를 넘는 id도 저장하고 조회할 수 있는지 테스트합니다."""
    big_id = 2 ** 40
    saved = await product_crud.save(
        db_session,
        obj_in={"id": big_id, "name": "Big", "description": "d", "price": Decimal("1.00")},
    )

    assert saved.id == big_id
    assert await product_crud.exists(db_session, big_id) is True
