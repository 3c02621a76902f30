"""Posts the list of present tag categories to an HTTP endpoint."""

import http.client
import json
import logging
from typing import Iterable

logger = logging.getLogger(__name__)


def encode_payload(data: Iterable[int]) -> str:
    """Encode category numbers as a compact JSON array."""
    values = list(data)
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            raise ValueError(f"category must be an integer in 0..255, got {value!r}")
    return json.dumps(values, separators=(",", ":"))


class HttpSender:
    """Sends JSON arrays by POST to ``/`` on a fixed host and port."""

    def __init__(self, host: str, port: int = 80, timeout: float = 5.0):
        self.host = host
        self.port = port
        self.timeout = timeout

    def send(self, data: Iterable[int]) -> bool:
        """POST ``data``; return True when the server answers 200 OK."""
        body = encode_payload(data).encode("utf-8")
        headers = {"Content-Type": "application/json", "Content-Length": str(len(body))}
        connection = http.client.HTTPConnection(self.host, self.port, timeout=self.timeout)
        try:
            connection.request("POST", "/", body=body, headers=headers)
            response = connection.getresponse()
            response.read()
            status = response.status
        except OSError as exc:
            logger.warning("HTTP POST failed: %s", exc)
            return False
        finally:
            connection.close()
        if status != http.client.OK:
            logger.warning("HTTP POST failed, code: %d", status)
            return False
        logger.info("Data sent successfully")
        return True