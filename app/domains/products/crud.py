# app/domains/products/crud.py

"""
'products' 테이블의 CRUD(Create, Read, Update, Delete) 작업을 담당하는 모듈입니다.
공통 동작은 app.core.crud_base.CRUDBase가 제공하며, 이 모듈은 상품 모델에 맞게 인스턴스를 만듭니다.
"""

from app.core.crud_base import CRUDBase
from app.domains.products import models as product_models
from app.domains.products import schemas as product_schemas


class CRUDProduct(CRUDBase[product_models.Product, product_schemas.ProductCreate, product_schemas.ProductUpdate]):
    def __init__(self):
        super().__init__(product_models.Product)


# CRUD 인스턴스 생성
product = CRUDProduct()
