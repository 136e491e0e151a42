# app/core/logging.py

"""
애플리케이션 로깅 초기화 모듈입니다.
각 모듈은 `logging.getLogger(__name__)`로 자신의 로거를 가져다 씁니다.
"""

import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    """루트 로거의 레벨과 포맷을 설정합니다. 여러 번 호출해도 핸들러는 하나만 유지됩니다."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT, force=True)
    # DEBUG_MODE가 아니면 SQLAlchemy 엔진 로그는 경고 이상만 출력합니다.
    if not settings.DEBUG_MODE:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
