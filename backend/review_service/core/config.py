from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="REVIEW_", case_sensitive=False)

    host: str = "0.0.0.0"
    port: int = 50051

    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "review"
    db_password: str = "review"
    db_name: str = "review"
    db_sslmode: str = "disable"
    database_url: str | None = None

    service_name: str = "review-service"
    log_level: str = "INFO"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{quote_plus(self.db_user)}:{quote_plus(self.db_password)}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?sslmode={self.db_sslmode}"
        )


settings = Settings()
