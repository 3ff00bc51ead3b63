import logging
import random

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from fancy_numbers.domain.number_rules import draw_random_number

number_router = APIRouter(prefix="/api/numbers")

# Shared by every request of this process.
random_source = random.Random()


def get_random_source() -> random.Random:
    return random_source


class NumberAPI:
    @staticmethod
    @number_router.get("/random", response_class=PlainTextResponse)
    async def get_random_number(rng: random.Random = Depends(get_random_source)):
        number = draw_random_number(rng)
        logging.debug(f"random number: {number}")
        return PlainTextResponse(str(number))
