from contextlib import asynccontextmanager

from fastapi import FastAPI

from routers import (
    api,
)
from common.logger import setup_logging
from databases.sql.create_table import create_table


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    create_table()
    yield


app = FastAPI(lifespan=lifespan)

app.include_router(api.router)
