from functools import lru_cache
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, HTTPException
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from hello_service.clock import current_local_time, format_local_time, hello_line
from hello_service.config import ConfigError
from hello_service.db import build_engine, check_connection, describe_error
from hello_service.users import list_users

app = FastAPI(
    title="Hello Service",
    version="1.0.0",
    description="Local time greeting and database connectivity checks.",
)


@lru_cache(maxsize=1)
def _cached_engine() -> Engine:
    return build_engine()


def get_engine() -> Engine:
    # failures are not cached, the next request retries the build
    try:
        return _cached_engine()
    except (ConfigError, SQLAlchemyError, ImportError) as e:
        raise HTTPException(status_code=503, detail=describe_error(e))


@app.get("/health")
def health(engine: Engine = Depends(get_engine)) -> Dict[str, Any]:
    try:
        check_connection(engine)
    except Exception as e:
        raise HTTPException(status_code=503, detail=describe_error(e))
    return {"status": "ok", "database": engine.url.database}


@app.get("/time")
def local_time() -> Dict[str, str]:
    t = current_local_time()
    return {"time": format_local_time(t), "message": hello_line(t)}


@app.get("/users")
def users(engine: Engine = Depends(get_engine)) -> List[Dict[str, str]]:
    try:
        rows = list_users(engine)
    except SQLAlchemyError as e:
        raise HTTPException(status_code=503, detail=describe_error(e))
    return [u.to_dict() for u in rows]
