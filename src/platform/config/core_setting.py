from pathlib import Path
from typing import Annotated, List, Optional

import orjson
from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Paro FC Site API'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    CLUB_NAME: str = 'Paro FC'

    # Runtime identity, shown on every log line and exported trace
    SERVICE_NAME: str = 'paro-fc-site'
    DEPLOY_ENV: str = 'local_dev'
    LOG_DIR: Path = _PROJECT_ROOT / 'logs'  # file sink only when DEBUG

    # Tracing
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None
    OTEL_CONSOLE_EXPORT: bool = False
    OTEL_SAMPLE_RATIO: float = 1.0

    # CORS
    # Comma separated or a JSON list; NoDecode hands the raw env value to the validator
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith('['):
            v = orjson.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Content store (Sanity)
    SANITY_PROJECT_ID: str = '4rd3jbsr'
    SANITY_DATASET: str = 'production'
    SANITY_API_VERSION: str = '2024-01-01'
    SANITY_API_TOKEN: Optional[SecretStr] = None  # Required for bookings (write access)
    SANITY_USE_CDN: bool = True  # Reads only; writes never go through the CDN
    CONTENT_STORE_TIMEOUT: float = 10.0  # seconds

    # Inventory compare-and-swap attempts before giving up on a contended match
    INVENTORY_MAX_ATTEMPTS: int = 5

    # Email (Resend)
    RESEND_API_KEY: Optional[SecretStr] = None  # Missing key -> log only, nothing is sent
    RESEND_API_URL: str = 'https://api.resend.com/emails'
    EMAIL_TIMEOUT: float = 10.0  # seconds
    SUPPORT_EMAIL: str = 'shop@parofc.com'
    ADMIN_EMAIL: str = 'admin@parofc.com'
    SHOP_EMAIL_FROM: str = 'Paro FC Shop <onboarding@resend.dev>'

    # Shop
    SHIPPING_FEE: int = 150  # Fixed shipping for Bhutan, in the order currency

    # Calendar export
    CALENDAR_UID_DOMAIN: str = 'parofc.com'
    MATCH_DURATION_HOURS: int = 2

    @property
    def has_sanity_write_token(self) -> bool:
        return bool(self.SANITY_API_TOKEN and self.SANITY_API_TOKEN.get_secret_value())

    @property
    def has_resend_api_key(self) -> bool:
        return bool(self.RESEND_API_KEY and self.RESEND_API_KEY.get_secret_value())


settings = Settings()  # type: ignore
