# src/adventure_board/config.py

import os
import typing
from typing import Optional

from pydantic import BaseModel, Field
from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(".env", usecwd=True))


def _unwrap(annotation):
    # Optional[int] -> int
    args = [a for a in typing.get_args(annotation) if a is not type(None)]
    if typing.get_origin(annotation) is typing.Union and len(args) == 1:
        return args[0]
    return annotation


# Names used by existing deployments of the bot dashboard; read when the
# primary name is unset.
LEGACY_NAMES = {
    "PORT_API": ("PORT",),
    "DB_PASS": ("DB_PASSWORD",),
    "ENVIRONMENT": ("NODE_ENV",),
}


class Settings(BaseModel):
    # API Settings
    HOST_API: str = Field(default="127.0.0.1")
    PORT_API: int = Field(default=3000)
    DEBUG_MODE: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")
    ENVIRONMENT: str = Field(default="development")

    # Database
    DB_HOST: str = Field(default="localhost")
    DB_PORT: int = Field(default=3306)
    DB_USER: Optional[str] = Field(default=None)
    DB_PASS: Optional[str] = Field(default=None)
    DB_NAME: Optional[str] = Field(default=None)
    DB_MIN: int = Field(default=1)
    DB_MAX: int = Field(default=10)

    # CORS
    ALLOWED_ORIGINS: str = Field(default="http://localhost:3000")

    # Rate limiting (off unless explicitly enabled; the client polls every few seconds)
    RATE_LIMIT_ENABLED: bool = Field(default=False)
    RATE_LIMIT_WINDOW_MS: int = Field(default=15 * 60 * 1000)
    RATE_LIMIT_MAX_REQUESTS: int = Field(default=10000)

    # Error reporting
    SENTRY_DSN: Optional[str] = Field(default=None)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_DIR: str = Field(default="logs")

    # Client
    API_BASE_URL: str = Field(default="http://localhost:3000")
    REFRESH_INTERVAL_SECONDS: float = Field(default=3.0)

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @classmethod
    def load(cls, environ: Optional[typing.Mapping[str, str]] = None):
        # BaseModel does not read os.environ itself, so coerce by annotation here.
        environ = os.environ if environ is None else environ

        env_vars = {}
        for field_name, field in cls.model_fields.items():
            val = environ.get(field_name)
            for legacy in LEGACY_NAMES.get(field_name, ()):
                if val:
                    break
                val = environ.get(legacy)
            if val is None or val == "":
                continue
            annotation = _unwrap(field.annotation)
            if annotation is bool:
                env_vars[field_name] = val.strip().lower() in ("true", "1", "yes", "on")
            elif annotation is int:
                env_vars[field_name] = int(val)
            elif annotation is float:
                env_vars[field_name] = float(val)
            else:
                env_vars[field_name] = val

        return cls(**env_vars)


# Instance to be used across the app
settings = Settings.load()
