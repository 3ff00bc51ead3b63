import os
from dotenv import load_dotenv

load_dotenv()

GENERATOR_URL = os.getenv("GENERATOR_URL", "http://localhost:8082/api/numbers/random")
GENERATOR_TIMEOUT = float(os.getenv("GENERATOR_TIMEOUT", "5.0"))
# 200 keeps the historical behavior; 502 surfaces upstream failures as errors.
UPSTREAM_ERROR_STATUS = int(os.getenv("UPSTREAM_ERROR_STATUS", "200"))

SERVICE_HOST = os.getenv("SERVICE_HOST", "0.0.0.0")
NUMBER_SERVICE_PORT = int(os.getenv("NUMBER_SERVICE_PORT", "8082"))
CALCULATOR_SERVICE_PORT = int(os.getenv("CALCULATOR_SERVICE_PORT", "8081"))

if __name__ == "__main__":
    print(GENERATOR_URL, GENERATOR_TIMEOUT, UPSTREAM_ERROR_STATUS)
    print(SERVICE_HOST, NUMBER_SERVICE_PORT, CALCULATOR_SERVICE_PORT)
