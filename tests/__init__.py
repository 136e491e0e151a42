# tests/__init__.py

"""
Product API 애플리케이션의 테스트 스위트 패키지입니다.

- `domains/`: 상품 도메인의 CRUD, 서비스, API 엔드포인트 테스트.
- `conftest.py`: 데이터베이스 세션, 테스트 클라이언트, 샘플 데이터 픽스처.
- `test_main.py`: 루트 및 헬스 체크 엔드포인트 테스트.
"""

__title__ = "Product API Tests"
__version__ = "0.1.0"  # 테스트 스위트의 내부 버전
__all__ = []
