import json
import uvicorn
from contextlib import asynccontextmanager
from typing import Any
from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from colstore.database.base import init_db
from colstore.settings import load_config


class UnicodeJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False).encode("utf-8")

from colapi.controller.project import router as project_router
from colapi.controller.column import router as column_router
from colapi.controller.phase import router as phase_router
from colapi.controller.task import router as task_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not app.state.db_ready:
        init_db(load_config()["database_url"])
        app.state.db_ready = True
    yield


def create_app(database_url: str = None) -> FastAPI:
    app = FastAPI(title="taskcols API", default_response_class=UnicodeJSONResponse, lifespan=lifespan)
    app.state.db_ready = False
    if database_url:
        init_db(database_url)
        app.state.db_ready = True

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_router = APIRouter(prefix="/api")
    api_router.include_router(project_router)
    api_router.include_router(column_router)
    api_router.include_router(phase_router)
    api_router.include_router(task_router)
    app.include_router(api_router)
    return app


app = create_app()


def main():
    config = load_config()
    uvicorn.run("colapi.main:app", host=config["api_host"], port=config["api_port"], reload=True)


if __name__ == "__main__":
    main()
