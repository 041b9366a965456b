# backoffice/core/config.py

from typing import Any, List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # 모델에 없는 변수는 무시
        case_sensitive=True
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Catalog Back-Office API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Admin back-office API for the product catalog and customer orders"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Enable SQL echo and verbose logging")
    LOG_LEVEL: str = Field("INFO", description="Root logging level")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Relational store connection URL (postgresql+asyncpg://...)")
    DB_POOL_SIZE: int = Field(10, description="Connections kept open in the pool")
    DB_MAX_OVERFLOW: int = Field(20, description="Extra connections allowed above DB_POOL_SIZE")
    DB_POOL_RECYCLE: int = Field(3600, description="Seconds before a pooled connection is recycled")

    # --- 세션 토큰 설정 ---
    SECRET_KEY: SecretStr = Field(..., description="Secret key for session token signing")
    ALGORITHM: str = Field("HS256", description="Algorithm used for session token signing")
    SESSION_EXPIRE_MINUTES: int = Field(60 * 12, description="Session lifetime in minutes")
    SESSION_COOKIE_NAME: str = Field("admin_session", description="Cookie that carries the session token")
    LOGIN_PATH: str = Field("/login", description="Where the client is sent after sign-out")

    # --- 업무 규칙 설정 ---
    # True 이면 값이 바뀌지 않은 수정 요청(영향받은 행 0개)을 400 으로 처리합니다.
    UNCHANGED_UPDATE_IS_ERROR: bool = Field(True, description="Reject updates that change nothing")

    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")

    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 운영 환경에서는 SQL echo 를 강제로 끕니다.
        if self.APP_ENV == "production" and self.DEBUG_MODE:
            self.DEBUG_MODE = False

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.get_secret_value().startswith("sqlite")


settings = Settings()
