"""Run the task-board API with uvicorn: ``python -m taskboard_svc``."""

import uvicorn

from . import config


def main() -> None:
    uvicorn.run(
        "taskboard_svc.api.app:app",
        host=config.SERVICE_HOST,
        port=config.SERVICE_PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
