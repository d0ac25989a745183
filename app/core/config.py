import os
import json
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # Basic settings
    PROJECT_NAME: str = "ToDo Backend"
    VERSION: str = "0.1.0"
    # Routes are served at /todo unless a prefix is configured
    API_PREFIX: str = ""

    # CORS settings; str in the union keeps non-JSON env values for the validator
    CORS_ORIGINS: Union[str, List[str]] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # JSON array first, comma separated string otherwise
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                if v.startswith("[") and v.endswith("]"):
                    v = v.strip("[]").strip()
                    if v:
                        return [i.strip().strip('"\'') for i in v.split(",")]
                    return []
                return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # Persistence store: "memory" or "sql"
    STORE_TYPE: str = "sql"

    # Database settings
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "todo"

    # Full SQLAlchemy URL, takes precedence over the DB_* settings
    DATABASE_URI: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        Database URI used by the SQL store
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        # MySQL by default
        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # Create database and tables on startup
    CREATE_TABLES: bool = True

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    RELOAD: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
