"""Application settings and configuration.

This module defines all configuration options for the Codemmunity server.
Settings are loaded from environment variables with sensible defaults and are
validated once, when the module is imported at startup.
"""

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

DEFAULT_CA_PATH = "./cert/DigiCertGlobalRootCA.crt.pem"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Either ``DATABASE_URL`` is given, or the individual ``DB_*`` connection
    options are, in which case the URL is assembled from them.
    """

    # Application metadata
    app_name: str = Field(default="Codemmunity Server", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8080, alias="APP_PORT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    db_driver: str = Field(default="mysql+pymysql", alias="DB_DRIVER")
    db_server: str | None = Field(default=None, alias="DB_SERVER")
    db_port: int = Field(default=3306, alias="DB_PORT")
    db_user: str | None = Field(default=None, alias="DB_USER")
    db_passwd: str | None = Field(default=None, alias="DB_PASSWD")
    db_database: str | None = Field(default=None, alias="DB_DATABASE")
    use_ssl: bool = Field(default=False, alias="USE_SSL")
    ssl_ca_path: str = Field(default=DEFAULT_CA_PATH, alias="SSL_CA_PATH")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    create_tables: bool = Field(default=False, alias="CREATE_TABLES")

    # CORS configuration; the API is open to any origin
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=False, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _check_database_options(self) -> "Settings":
        if self.database_url is None:
            missing = [
                alias
                for alias, value in (
                    ("DB_SERVER", self.db_server),
                    ("DB_USER", self.db_user),
                    ("DB_PASSWD", self.db_passwd),
                    ("DB_DATABASE", self.db_database),
                )
                if value is None
            ]
            if missing:
                raise ValueError(
                    f"Database is not configured; missing {', '.join(missing)}"
                )
        if self.use_ssl and not Path(self.ssl_ca_path).is_file():
            raise ValueError(f"USE_SSL is set but CA file {self.ssl_ca_path} does not exist")
        return self

    @property
    def effective_database_url(self) -> str | URL:
        """Return the database URL, building it from the DB_* options if needed.

        Returns:
            The explicit ``DATABASE_URL`` when set, otherwise a SQLAlchemy ``URL``
        """
        if self.database_url is not None:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_passwd,
            host=self.db_server,
            port=self.db_port,
            database=self.db_database,
        )

    @property
    def database_connect_args(self) -> dict[str, object]:
        """Return driver keyword arguments for the engine.

        SQLite needs cross-thread access for the threadpool FastAPI runs sync
        handlers in; MySQL takes its TLS root certificate here.
        """
        return self.connect_args_for(self.effective_database_url)

    def connect_args_for(self, url: str | URL) -> dict[str, object]:
        """Return driver keyword arguments suited to the backend of ``url``."""
        backend = make_url(url).get_backend_name()
        if backend == "sqlite":
            return {"check_same_thread": False}
        if self.use_ssl:
            return {"ssl": {"ca": self.ssl_ca_path}}
        return {}


settings = Settings()
