"""Run the API server: ``python -m smart_parking``."""

import uvicorn

from smart_parking.config import settings


def main():
    uvicorn.run(
        "smart_parking.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
