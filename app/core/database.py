# app/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 비동기 세션 생성을 위한 유틸리티 함수를 제공합니다.
- 애플리케이션 시작 시 데이터베이스 테이블을 생성하는 함수를 포함합니다.
"""

import logging
from typing import Any, AsyncGenerator, Dict, Optional
from contextlib import asynccontextmanager

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings

# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 모델 모듈을 임포트합니다.
from app.domains.products import models  # noqa: F401

logger = logging.getLogger(__name__)


def build_engine_kwargs(database_url: str) -> Dict[str, Any]:
    """
    드라이버에 맞는 엔진 옵션을 만듭니다.
    SQLite는 큐 풀을 쓰지 않으므로 풀 크기 옵션을 넘기지 않습니다.
    """
    engine_kwargs: Dict[str, Any] = {
        "echo": settings.DEBUG_MODE,  # 디버그 모드일 때만 SQL 쿼리 출력
        "future": True,
    }
    if make_url(database_url).get_backend_name() != "sqlite":
        engine_kwargs.update(
            pool_recycle=settings.DB_POOL_RECYCLE,  # 일정 시간마다 연결 재활용
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )
    return engine_kwargs


# SQLModel 엔진을 생성합니다. (실제 연결은 첫 요청 시점에 맺어집니다)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL.get_secret_value(),  # SecretStr 값에 접근
    **build_engine_kwargs(settings.DATABASE_URL.get_secret_value()),
)

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# =============================================================================
# 데이터베이스 초기화 및 테이블 생성 함수
# =============================================================================
async def create_db_and_tables(db_engine: Optional[AsyncEngine] = None) -> None:
    """
    누락된 테이블을 생성합니다. 기존 테이블을 삭제하거나 변경하지는 않습니다.
    db_engine을 생략하면 모듈의 기본 엔진을 사용합니다.
    """
    logger.info("데이터베이스 테이블 생성을 시도합니다...")
    async with (db_engine or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("데이터베이스 테이블 생성이 완료되었습니다 (또는 이미 존재).")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    CLI 스크립트 등 요청 밖에서 사용할 독립적인 비동기 DB 세션을 제공하는 컨텍스트 관리자입니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
