from pydantic_settings import BaseSettings, SettingsConfigDict
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TODO_API_", env_file=".env", extra="ignore")
    DATABASE_URL: str = "sqlite:///./todo.db"
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    CREATE_TABLES: bool = True
settings = Settings()
