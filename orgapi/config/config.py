"""
Service configuration, read once at start-up from the environment and .env files.
"""
import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from orgapi.mappers.identity import DEFAULT_API_BASE_URL

from .enums import GraphBackend

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


class ServiceConfig(BaseSettings):
    """
    Immutable settings for the organisations service.

    Values come from keyword arguments first, then environment variables, then
    the .env file in the working directory. Instances are frozen: build a new
    one instead of assigning to a field.
    """

    model_config = SettingsConfigDict(
        extra='ignore',
        frozen=True,
        env_file='.env',
        env_file_encoding='utf-8',
    )

    GRAPH_BACKEND: GraphBackend = GraphBackend.NEO4J

    NEO4J_URL: str = 'bolt://localhost:7687'
    NEO4J_USER: Optional[str] = None
    NEO4J_PASSWORD: Optional[str] = None
    NEO4J_DATABASE: Optional[str] = None
    # seconds; handed to the driver as a per-transaction deadline
    NEO4J_QUERY_TIMEOUT: Optional[float] = None

    SURREAL_ENDPOINT: str = 'ws://localhost:8000/rpc'
    SURREAL_USER: str = 'root'
    SURREAL_PASSWORD: str = 'root'
    SURREAL_NAMESPACE: str = 'orgapi'
    SURREAL_DATABASE: str = 'orgapi'

    API_BASE_URL: str = DEFAULT_API_BASE_URL
    CACHE_CONTROL_HEADER: str = 'max-age=30, public'
    INCLUDE_RELATED_ORGANISATIONS: bool = False

    APP_NAME: str = 'public-organisations-api'
    APP_HOST: str = '0.0.0.0'
    APP_PORT: int = 8080
    LOG_LEVEL: str = 'INFO'

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f'LOG_LEVEL must be one of {", ".join(LOG_LEVELS)}, got {value}')
        return level

    @property
    def log_level(self) -> int:
        return getattr(logging, self.LOG_LEVEL)
