# app/core/config.py

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드하며, 프로세스 시작 시 한 번만 읽습니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',           # .env 파일 인코딩
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Product API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Minimal CRUD API for the Product resource"
    # 애플리케이션 환경 (예: "development", "production", "testing")
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    # 디버그 모드 활성화 여부 (SQL 쿼리 출력)
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for SQL echo and detailed logging")

    # --- 서버 설정 ---
    APP_HOST: str = Field("0.0.0.0", description="Listen address for the HTTP server")
    APP_PORT: int = Field(8080, description="Listen port for the HTTP server")

    # --- 로깅 설정 ---
    LOG_LEVEL: str = Field("INFO", description="Root log level (DEBUG, INFO, WARNING, ...)")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Async SQLAlchemy database URL (e.g. postgresql+asyncpg://...)")
    # 애플리케이션 시작 시 누락된 테이블을 자동으로 생성할지 여부
    DB_SCHEMA_AUTO_UPDATE: bool = Field(True, description="Create missing tables at application start-up")
    DB_POOL_SIZE: int = Field(10, description="Connection pool size (queue pool drivers only)")
    DB_MAX_OVERFLOW: int = Field(20, description="Connections allowed above the pool size")
    DB_POOL_RECYCLE: int = Field(3600, description="Seconds after which pooled connections are recycled")


settings = Settings()
