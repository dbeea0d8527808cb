import uvicorn
from app.core.config import settings

def run() -> None:
    uvicorn.run(
        "app.api:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )

if __name__ == "__main__":
    run()
