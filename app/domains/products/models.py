# app/domains/products/models.py

"""
'products' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel, Column
from sqlalchemy.types import BigInteger, Integer, Numeric, Text


# =============================================================================
# products 테이블 모델
# =============================================================================
class ProductBase(SQLModel):
    """
    products 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    name: str = Field(nullable=False, description="상품명")
    description: str = Field(sa_column=Column(Text, nullable=False), description="상품 설명")
    price: Decimal = Field(sa_column=Column(Numeric(10, 2), nullable=False), description="가격 (소수점 2자리)")


class Product(ProductBase, table=True):
    """
    products 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    id는 저장소가 생성 시 할당하며 이후 변경되지 않습니다.
    """
    __tablename__ = "products"

    # PostgreSQL에서는 BIGINT(BIGSERIAL), SQLite에서는 rowid 별칭이 되도록 INTEGER를 사용합니다.
    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
    )
