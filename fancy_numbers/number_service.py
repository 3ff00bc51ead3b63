import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from fancy_numbers.load_secrets import NUMBER_SERVICE_PORT, SERVICE_HOST
from fancy_numbers.routers import numbers

logging.basicConfig(level=logging.DEBUG)


@asynccontextmanager
async def lifespan(app):
    logging.info("Start Number Service")
    try:
        yield
    finally:
        logging.info("Stop Number Service")


app = FastAPI(lifespan=lifespan)
app.include_router(numbers.number_router)


if __name__ == "__main__":
    uvicorn.run(app, host=SERVICE_HOST, port=NUMBER_SERVICE_PORT)
