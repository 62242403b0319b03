from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "BucketList"
    VERSION: str = "0.1.0"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Codec Settings
    # Reject decoded records whose coordinates are outside the valid range
    VALIDATE_COORDINATES: bool = False
    # Write the "version" tag into serialized records
    INCLUDE_FORMAT_VERSION: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
