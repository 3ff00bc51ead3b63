"""Number rules that are independent from HTTP.

Rule of thumb:
- OK: arithmetic, primality, string formatting.
- Not OK: httpx, FastAPI, the global `random` module state.
"""
import random

from fancy_numbers.models.dc_models import CalculationResultModel

MIN_RANDOM_NUMBER = 1
MAX_RANDOM_NUMBER = 100

REPORT_TEMPLATE = (
    "Fancy Calculation Results:\n"
    "Numbers: {num1} and {num2}\n"
    "Sum: {sum} ({primality})\n"
    "Product: {product}\n"
    "Average: {average:.2f}\n"
)


def is_prime(n: int) -> bool:
    """Trial division over the 6k +/- 1 wheel."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def draw_random_number(random_source: random.Random) -> int:
    """Draw one integer uniformly from [1, 100].

    Args:
        random_source (random.Random): Generator owned by the caller

    Returns:
        int: The drawn number
    """
    return random_source.randint(MIN_RANDOM_NUMBER, MAX_RANDOM_NUMBER)


def calculate(num1: int, num2: int) -> CalculationResultModel:
    """Compute sum, product, average and primality of the sum.

    Args:
        num1 (int): First number from the generator
        num2 (int): Second number from the generator

    Returns:
        CalculationResultModel: Immutable result of the calculation
    """
    total = num1 + num2
    return CalculationResultModel(
        num1=num1,
        num2=num2,
        sum=total,
        product=num1 * num2,
        average=total / 2.0,
        is_prime=is_prime(total),
    )


def format_report(result: CalculationResultModel) -> str:
    """Render the plaintext report returned by the calculator endpoint."""
    return REPORT_TEMPLATE.format(
        num1=result.num1,
        num2=result.num2,
        sum=result.sum,
        primality="prime" if result.is_prime else "not prime",
        product=result.product,
        average=result.average,
    )
