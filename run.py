"""uvicorn entry point."""
import uvicorn
from freezer_backend.config.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "freezer_backend.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )
