from __future__ import annotations

from fastapi import FastAPI

from ..api.routes import routes, seasons, stations, summary, users


def create_app() -> FastAPI:
    app = FastAPI(title="Ridestats API")
    app.include_router(summary.router)
    app.include_router(seasons.router)
    app.include_router(stations.router)
    app.include_router(users.router)
    app.include_router(routes.router)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"status": "ok", "service": "ridestats"}

    return app


app = create_app()
