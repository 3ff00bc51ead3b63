import logging
import re
from typing import Protocol

import httpx

INTEGER_BODY = re.compile(r"-?[0-9]+")


class UpstreamTransportError(Exception):
    """The number generator could not be reached or answered with garbage."""


class RandomNumberSource(Protocol):
    async def fetch_random_number(self) -> int | None: ...


class NumberGeneratorClient:
    def __init__(self, url: str, http_client: httpx.AsyncClient):
        self.url = url
        self.http_client = http_client

    async def fetch_random_number(self) -> int | None:
        """Ask the number generator for one random number

        Raises:
            UpstreamTransportError: Bad URL, connection failure, non-2xx status or a body that is not an integer

        Returns:
            int | None: The generated number, None if the generator answered with an empty or null body
        """
        try:
            response = await self.http_client.get(self.url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logging.error(f"Request to number generator failed: {e}")
            raise UpstreamTransportError(str(e)) from e

        body = response.text.strip()
        if not body or body == "null":
            return None
        if not INTEGER_BODY.fullmatch(body):
            logging.error(f"Could not parse generator response {body!r}")
            raise UpstreamTransportError(f"Could not parse generator response {body!r}")
        number = int(body)
        logging.debug(f"number from generator: {number}")
        return number
