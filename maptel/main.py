import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from maptel.api_models import (
    CreateResponse,
    DeleteResponse,
    EraseResponse,
    ERROR_HTTP_STATUS,
    InsertRequest,
    InsertResponse,
    LogLevelRequest,
    TableResponse,
    TransformResponse,
    error_detail,
)
from maptel.buffer import fit_to_capacity
from maptel.core import config
from maptel.core.exceptions import MaptelError
from maptel.core.logging import configure_logging
from maptel.resolver import transform_detailed
from maptel.store import TableStore

configure_logging()
log = logging.getLogger("maptel")


def get_store(request: Request) -> TableStore:
    return request.app.state.store


def create_app(store: Optional[TableStore] = None) -> FastAPI:
    """Build the HTTP service around a table store.

    Handlers are async and never await, so every operation runs to
    completion on the event loop before the next one starts.
    """
    app = FastAPI(title="Maptel", version="0.1.0")
    app.state.store = store if store is not None else TableStore()

    @app.exception_handler(MaptelError)
    async def maptel_error(request: Request, exc: MaptelError):
        log.info(f"contract_violation code={exc.code} msg={exc.message}",
                 extra={"route": request.url.path})
        return JSONResponse(
            status_code=ERROR_HTTP_STATUS.get(exc.code, 400),
            content=error_detail(exc.code, exc.message).model_dump(),
        )

    @app.middleware("http")
    async def req_log(request: Request, call_next):
        start = time.time()
        route = request.url.path
        remote = request.client.host if request.client else "-"
        resp = await call_next(request)
        duration_ms = int((time.time() - start) * 1000)
        log.info(f"request_complete status={resp.status_code} duration_ms={duration_ms}",
                 extra={"route": route, "remote_addr": remote})
        return resp

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    @app.get("/version")
    def version():
        return {"git_sha": config.GIT_SHA}

    @app.post("/maps", status_code=201)
    async def create_map(request: Request) -> CreateResponse:
        return CreateResponse(id=get_store(request).create())

    @app.get("/maps")
    async def list_maps(request: Request):
        return {"ids": get_store(request).list_ids()}

    @app.get("/maps/{table_id}")
    async def get_map(table_id: int, request: Request) -> TableResponse:
        return TableResponse(id=table_id, entries=get_store(request).entries(table_id))

    @app.delete("/maps/{table_id}")
    async def delete_map(table_id: int, request: Request) -> DeleteResponse:
        return DeleteResponse(id=table_id, deleted=get_store(request).delete(table_id))

    @app.put("/maps/{table_id}/entries/{tel_src}")
    async def insert_entry(
        table_id: int, tel_src: str, req: InsertRequest, request: Request
    ) -> InsertResponse:
        get_store(request).insert(table_id, tel_src, req.dst)
        return InsertResponse(id=table_id, src=tel_src, dst=req.dst)

    @app.delete("/maps/{table_id}/entries/{tel_src}")
    async def erase_entry(table_id: int, tel_src: str, request: Request) -> EraseResponse:
        erased = get_store(request).erase(table_id, tel_src)
        return EraseResponse(id=table_id, src=tel_src, erased=erased)

    @app.get("/maps/{table_id}/transform/{tel_src}")
    async def transform_number(
        table_id: int,
        tel_src: str,
        request: Request,
        capacity: Optional[int] = None,
    ) -> TransformResponse:
        result, cyclic = transform_detailed(get_store(request), table_id, tel_src)
        fitted = result if capacity is None else fit_to_capacity(result, capacity)
        return TransformResponse(
            id=table_id,
            source=tel_src,
            result=fitted,
            cyclic=cyclic,
            truncated=len(fitted) < len(result),
            capacity=capacity,
        )

    @app.post("/admin/log-level")
    def set_log_level(req: LogLevelRequest):
        """Change log level at runtime (DEBUG, INFO, WARNING, ERROR, CRITICAL).

        Gated by ADMIN_ENDPOINT_ENABLED.
        """
        if not config.ADMIN_ENDPOINT_ENABLED:
            return JSONResponse(
                status_code=404,
                content={"detail": "Admin endpoint disabled"}
            )

        level_upper = req.level.upper()
        if level_upper not in config.VALID_LOG_LEVELS:
            return JSONResponse(
                status_code=400,
                content={"detail": f"Invalid log level. Must be one of: {list(config.VALID_LOG_LEVELS)}"}
            )

        logging.getLogger().setLevel(getattr(logging, level_upper))
        logging.getLogger("maptel").setLevel(getattr(logging, level_upper))
        log.info(f"Log level changed to {level_upper}")

        return {
            "success": True,
            "log_level": level_upper,
            "message": f"Log level set to {level_upper}"
        }

    return app


app = create_app()
