from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    db_url: str = "sqlite+aiosqlite:///./arena.db"
    env: Literal["prod", "dev"] = "prod"
    log_level: str = "INFO"

    cors_origins: list[str] = ["*"]

    @property
    def is_dev(self) -> bool:
        return self.env == "dev"


load_dotenv()
settings = Config()
