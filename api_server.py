# api_server.py

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Optional

from fastapi import BackgroundTasks, Depends, FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from randomuser.client import RandomUserClient
from randomuser.config import Settings, load_settings
from randomuser.errors import ApiError
from randomuser.formatters import format_date_of_birth, get_formatted_address, get_full_name
from randomuser.job import run_export_job
from randomuser.log import configure_logging
from randomuser.models import FormatOptions, UserRecord
from randomuser.params import FetchOptions


@lru_cache
def get_settings() -> Settings:
    # Read .env / environment once, on first use (not when the module is imported).
    return load_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().log_level) # handlers are attached when the server starts
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Random User Service",
    description="Fetch and format users from the RandomUser API.",
    version="0.2.0",
)


def get_client(settings: Settings = Depends(get_settings)):
    client = RandomUserClient(settings)
    try:
        yield client
    finally:
        client.close()


@app.exception_handler(ApiError)
def api_error_handler(request, exc: ApiError):
    status = int(exc.code) if exc.code.isdigit() else 502
    return JSONResponse(status_code=status, content=exc.to_dict())


def _build_options(results=None, gender=None, nat=None, seed=None, page=None) -> FetchOptions:
    try:
        return FetchOptions(
            results=results,
            gender=gender,
            nat=nat.split(",") if nat else None,
            seed=seed,
            page=page,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _present(user: UserRecord, date_format: Optional[str]) -> dict:
    date_format = date_format or get_settings().date_format
    return {
        "full_name": get_full_name(user) if user.name else None,
        "address": get_formatted_address(user) if user.location else None,
        "dob": format_date_of_birth(user, FormatOptions(date_format=date_format)),
        "record": user.model_dump(mode="json", exclude_none=True),
    }


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/users")
def list_users(
    results: Optional[int] = Query(None),
    gender: Optional[str] = Query(None),
    nat: Optional[str] = Query(None, description="comma separated nationality codes"),
    seed: Optional[str] = Query(None),
    page: Optional[int] = Query(None),
    date_format: Optional[str] = Query(None, description="defaults to RANDOMUSER_DATE_FORMAT"),
    client: RandomUserClient = Depends(get_client),
):
    options = _build_options(results, gender, nat, seed, page)
    response = client.get_users(options)
    return {
        "info": response.info.model_dump(),
        "users": [_present(u, date_format) for u in response.results],
    }


@app.get("/users/random")
def random_user(
    gender: Optional[str] = Query(None),
    nat: Optional[str] = Query(None),
    seed: Optional[str] = Query(None),
    date_format: Optional[str] = Query(None, description="defaults to RANDOMUSER_DATE_FORMAT"),
    client: RandomUserClient = Depends(get_client),
):
    user = client.get_random_user(_build_options(gender=gender, nat=nat, seed=seed))
    return _present(user, date_format)


@app.post("/jobs/export")
def trigger_export(background_tasks: BackgroundTasks):
    """
    Trigger one export run in the background.

    Returns immediately with 'queued', while the job runs.
    """
    background_tasks.add_task(run_export_job, None, get_settings())
    return {"status": "queued"}


@app.post("/jobs/export/sync")
def run_export_sync():
    """
    Run the export synchronously and return metrics.
    Handy for testing.
    """
    metrics = run_export_job(None, get_settings())
    return {"status": "completed", "metrics": metrics}
