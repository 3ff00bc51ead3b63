from pydantic import BaseModel


class CalculationResultModel(BaseModel):
    num1: int
    num2: int
    sum: int
    product: int
    average: float  # real division, never truncated
    is_prime: bool  # primality of sum

    class Config:
        frozen = True
