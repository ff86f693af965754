"""Run the API server: ``python -m company_api``."""

import uvicorn

from company_api.config import get_settings
from company_api.database import init_db
from company_api.logging_config import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    init_db()
    uvicorn.run("company_api.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
