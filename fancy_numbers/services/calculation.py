import logging
from typing import NamedTuple

from fancy_numbers.domain.number_rules import calculate, format_report
from fancy_numbers.services.generator_client import RandomNumberSource, UpstreamTransportError

NULL_RESULT_MESSAGE = "Error: Failed to retrieve random numbers from generator service"


class CalculationOutcome(NamedTuple):
    body: str
    ok: bool


async def calculate_fancy(source: RandomNumberSource) -> CalculationOutcome:
    """Fetch two numbers one after the other and build the report.

    Every failure is turned into an "Error: " body, nothing is raised.
    """
    try:
        num1 = await source.fetch_random_number()
        num2 = await source.fetch_random_number()
    except UpstreamTransportError as e:
        return CalculationOutcome(f"{NULL_RESULT_MESSAGE}: {e}", False)

    if num1 is None or num2 is None:
        logging.error(f"Generator returned no value: num1={num1}, num2={num2}")
        return CalculationOutcome(NULL_RESULT_MESSAGE, False)

    result = calculate(num1, num2)
    logging.info(f"result: {result}")
    try:
        return CalculationOutcome(format_report(result), True)
    except Exception as e:
        logging.error(f"Error in formatting calculation results: {e}")
        return CalculationOutcome(
            f"Error: Failed to format calculation results: {e}", False
        )
