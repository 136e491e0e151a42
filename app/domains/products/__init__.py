# app/domains/products/__init__.py

"""
FastAPI 애플리케이션의 'products' 도메인 패키지입니다.

이 패키지는 상품(Product) 테이블에 해당하는 데이터 모델과
관련된 서비스 로직 및 API 엔드포인트를 포함합니다.

주요 서브모듈:
- `models.py`: 'products' 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 상품 데이터에 대한 Pydantic 모델 (요청 및 응답 유효성 검사).
- `crud.py`: 'products' 테이블에 대한 비동기 CRUD 로직.
- `services.py`: 라우터와 CRUD 사이의 얇은 서비스 계층.
- `routers.py`: 상품 데이터에 접근하기 위한 FastAPI API 엔드포인트 정의.
"""

__title__ = "Product Domain"
__description__ = "Manages the Product resource."
__version__ = "0.1.0"
__all__ = []  # 'from app.domains.products import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
