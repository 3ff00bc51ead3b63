import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from fancy_numbers.load_secrets import UPSTREAM_ERROR_STATUS
from fancy_numbers.services.calculation import calculate_fancy
from fancy_numbers.services.generator_client import RandomNumberSource

calculator_router = APIRouter(prefix="/api/calculate")


def get_generator_client(request: Request) -> RandomNumberSource:
    """Return the generator client opened by the application lifespan."""
    return request.app.state.generator_client


def get_error_status() -> int:
    return UPSTREAM_ERROR_STATUS


class CalculatorAPI:
    @staticmethod
    @calculator_router.get("/fancy", response_class=PlainTextResponse)
    async def calculate_fancy_numbers(
        source: RandomNumberSource = Depends(get_generator_client),
        error_status: int = Depends(get_error_status),
    ):
        outcome = await calculate_fancy(source)
        if outcome.ok:
            return PlainTextResponse(outcome.body, status_code=status.HTTP_200_OK)
        logging.info(f"Responding with error body and status {error_status}")
        return PlainTextResponse(outcome.body, status_code=error_status)
