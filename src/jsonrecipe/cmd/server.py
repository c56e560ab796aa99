import logging

import uvicorn
from fastapi import FastAPI

from jsonrecipe.settings import settings
from jsonrecipe.web.routes import router


def create_app() -> FastAPI:
    app = FastAPI(title="JSON Recipe API")

    app.include_router(router)

    return app


app = create_app()


def main():
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(
        "jsonrecipe.cmd.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
