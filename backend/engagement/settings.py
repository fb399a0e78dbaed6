from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 5001
    RELOAD: bool = False


settings = Settings(_env_file=".env", _env_file_encoding="utf-8")
