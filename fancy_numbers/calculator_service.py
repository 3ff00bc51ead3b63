import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from fancy_numbers.load_secrets import (
    CALCULATOR_SERVICE_PORT,
    GENERATOR_TIMEOUT,
    GENERATOR_URL,
    SERVICE_HOST,
)
from fancy_numbers.routers import calculator
from fancy_numbers.services.generator_client import NumberGeneratorClient

logging.basicConfig(level=logging.DEBUG)


@asynccontextmanager
async def lifespan(app):
    """Open the HTTP client used to reach the number generator.
    The client is shared by every request and closed on shutdown.
    """
    http_client = httpx.AsyncClient(timeout=GENERATOR_TIMEOUT)
    app.state.generator_client = NumberGeneratorClient(GENERATOR_URL, http_client)
    logging.info(f"Calculator Service uses generator at {GENERATOR_URL}")
    try:
        yield
    finally:
        await http_client.aclose()
        logging.info("Stop Calculator Service")


app = FastAPI(lifespan=lifespan)
app.include_router(calculator.calculator_router)


if __name__ == "__main__":
    uvicorn.run(app, host=SERVICE_HOST, port=CALCULATOR_SERVICE_PORT)
