import uvicorn
from lexigrow.config.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "lexigrow.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
