import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 데이터베이스 모듈 임포트
from app.core.config import settings
from app.core.database import engine, create_db_and_tables
from app.core import dependencies as deps
from app.core.logging import setup_logging

from app import API_PREFIX

# 도메인 라우터 임포트
from app.domains.products.routers import router as products_router

setup_logging()
logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
# 애플리케이션 시작 및 종료 시 실행될 비동기 작업을 정의합니다.
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트(테이블 생성, 연결 풀 종료)를 처리합니다.
    """
    logger.info("FastAPI 애플리케이션 시작 중... (env=%s)", settings.APP_ENV)
    try:
        # --- 시작 시 실행할 로직 ---
        if settings.DB_SCHEMA_AUTO_UPDATE:
            await create_db_and_tables()
        else:
            logger.info("DB_SCHEMA_AUTO_UPDATE=False: 테이블 자동 생성을 건너뜁니다.")

    except Exception:
        logger.exception("애플리케이션 시작 중 오류 발생")
        raise

    yield  # 애플리케이션 실행

    logger.info("FastAPI 애플리케이션 종료 중...")
    try:
        # --- 종료 시 실행할 로직: 데이터베이스 연결 풀 종료 ---
        await engine.dispose()
        logger.info("데이터베이스 연결 풀 종료 완료.")

    except Exception:
        logger.exception("애플리케이션 종료 중 오류 발생")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI (Interactive API documentation)
    redoc_url="/redoc",     # ReDoc (Alternative API documentation)
    lifespan=lifespan
)

# -- CORS (Cross-Origin Resource Sharing) 미들웨어 설정 --
# 프로덕션에서는 'allow_origins'를 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 도메인 라우터 포함 --
# 기본 경로(/products)와 버전 경로(/api/v1/products) 모두에 등록합니다.
app.include_router(products_router, prefix="/products")
app.include_router(products_router, prefix=f"{API_PREFIX}/products", include_in_schema=False)


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    Product API의 루트 엔드포인트입니다.
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": "Welcome to Product API. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
# 애플리케이션과 데이터베이스의 연결 상태를 확인하는 엔드포인트입니다.
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(deps.get_db_session)):
    """
    데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.exec(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        logger.warning("헬스 체크 중 데이터베이스 오류: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e}"
        )
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database health check failed: No result from test query"
    )


# -- Uvicorn 서버 직접 실행 (개발용) --
def run() -> None:
    import uvicorn
    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
