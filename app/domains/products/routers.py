# app/domains/products/routers.py

"""
'products' 도메인과 관련된 API 엔드포인트를 정의하는 모듈입니다.

찾을 수 없는 상품은 본문 없는 404로, 삭제는 대상 존재 여부와 관계없이 204로 응답합니다.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status

from . import schemas as product_schemas
from .services import ProductService, get_product_service

# APIRouter 인스턴스 생성
router = APIRouter(
    tags=["Product Management (상품 관리)"],  # Swagger UI에 표시될 태그
    responses={404: {"description": "Not found"}},  # 이 라우터의 공통 응답 정의
)


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get(
    "",
    response_model=List[product_schemas.ProductRead],
    summary="모든 상품 조회",
)
async def read_products(service: ProductService = Depends(get_product_service)):
    """
    모든 상품 목록을 조회합니다. 상품이 없으면 빈 목록을 반환합니다.
    """
    return await service.get_all_products()


@router.get(
    "/{product_id}",
    response_model=product_schemas.ProductRead,
    summary="특정 상품 조회",
)
async def read_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """
    특정 ID의 상품을 조회합니다.
    """
    db_product = await service.get_product_by_id(product_id)
    if db_product is None:
        return _not_found()
    return db_product


@router.post(
    "",
    response_model=product_schemas.ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 상품 생성",
)
async def create_product(
    product_in: product_schemas.ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    """
    새로운 상품을 생성합니다.
    - **name**: 상품명 (필수)
    - **description**: 설명 (필수)
    - **price**: 가격 (필수)
    """
    return await service.create_product(product_in)


@router.put(
    "/{product_id}",
    response_model=product_schemas.ProductRead,
    summary="상품 정보 수정",
)
async def update_product(
    product_id: int,
    product_in: product_schemas.ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    """
    ID로 특정 상품의 정보를 교체합니다. 본문의 id는 무시됩니다.
    """
    db_product = await service.update_product(product_id, product_in)
    if db_product is None:
        return _not_found()
    return db_product


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="상품 삭제",
)
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """
    ID로 특정 상품을 삭제합니다. 상품이 없어도 204를 반환합니다.
    """
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
