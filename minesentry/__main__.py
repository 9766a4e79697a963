"""
Run the API with uvicorn: python -m minesentry
Host and port come from HOST / PORT settings.
"""

import uvicorn

from minesentry.core.settings import settings


def main() -> None:
    uvicorn.run(
        "minesentry.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
