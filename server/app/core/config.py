from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()

class Settings(BaseModel):
    # Auth (observed always, enforced only when true)
    require_auth: bool = os.getenv("REQUIRE_AUTH", "false").lower() == "true"

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
