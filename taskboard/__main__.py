"""Run the Taskboard API with uvicorn: ``python -m taskboard``."""
import uvicorn

from taskboard.config import settings


def main() -> None:
    uvicorn.run(
        "taskboard.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    main()
