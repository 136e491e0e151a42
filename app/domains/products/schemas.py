# app/domains/products/schemas.py

"""
'products' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
응답 스키마는 '...Read' 패턴을 사용합니다.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import SQLModel


class ProductBase(SQLModel):
    name: str
    description: str
    price: Decimal


class ProductCreate(ProductBase):
    # 본문에 id가 포함될 수 있지만 생성 시에는 무시됩니다 (저장소가 할당).
    id: Optional[int] = None


class ProductUpdate(ProductBase):
    # 전체 교체 방식: name, description, price 모두 필요합니다.
    # 본문의 id는 무시되고 경로의 id가 사용됩니다.
    id: Optional[int] = None


class ProductRead(SQLModel):
    id: int
    name: str
    description: str
    price: float  # JSON 숫자로 직렬화

    class Config:  # Pydantic이 ORM 객체의 속성에서 데이터를 가져와 스키마를 구성
        from_attributes = True
