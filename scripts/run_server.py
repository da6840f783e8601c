import uvicorn

from mandi_relay.config.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "mandi_relay.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
