# app/__init__.py

"""
Product API FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 로깅을 담는 core 서브패키지,
그리고 상품(Product) 도메인을 담는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Product API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # 버전이 붙은 API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Minimal CRUD API for the Product resource."
__license__ = "MIT"
__all__ = []  # 'from app import *' 시 내보낼 이름 목록.
