from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from mywebapi.utils.passwords import HASH_ITERATIONS

CONFIG_DIR = Path.home() / ".config" / "mywebapi"
CONFIG_ENV = CONFIG_DIR / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MYWEBAPI_",
        env_file=(CONFIG_ENV, ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_title: str = "MyWebAPI"
    app_description: str = "Web API host with OpenAPI documentation"
    app_version: str = "1.0.0"
    api_document_name: str = "v1"
    api_prefix: str = "/api"
    https_redirect: bool = True
    api_users_file: Path = CONFIG_DIR / "api_users.json"
    password_hash_iterations: int = HASH_ITERATIONS

    host: str = "127.0.0.1"
    port: int = 8000
    ssl_certfile: Path | None = None
    ssl_keyfile: Path | None = None

    log_level: str = "INFO"
    log_file: Path = CONFIG_DIR / "logs" / "app.log"
