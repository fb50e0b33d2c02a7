from __future__ import annotations

"""
Simple TCP REPL server for minischeme.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(define x 1) (+ x 1)"}
- Response: {"ok": true, "result": "<printed value>"} or {"ok": false, "error": <message>}

Each connection gets its own Interpreter, so definitions persist for the
lifetime of a connection and no environment is shared between threads.
"""

import json
import logging
import socket
import threading
from typing import Tuple

from minischeme.config import configure_logging, get_repl_address
from minischeme.errors import SchemeError
from minischeme.interpreter import Interpreter
from minischeme.printer import to_string

logger = logging.getLogger(__name__)


def handle_request(interp: Interpreter, line: str) -> dict:
    """Decode one request line, run it against `interp`, and build the response."""
    try:
        req = json.loads(line)
    except json.JSONDecodeError as ex:
        return {"ok": False, "error": f"Invalid request: {ex}"}
    if not isinstance(req, dict):
        return {"ok": False, "error": "Invalid request: expected a JSON object"}

    if req.get("cmd") != "eval":
        return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}

    code = req.get("code", "")
    if not isinstance(code, str):
        return {"ok": False, "error": "Invalid request: code must be a string"}
    try:
        result = interp.eval(code)
    except (SchemeError, RecursionError) as ex:
        logger.warning("Evaluation failed: %s", ex)
        return {"ok": False, "error": str(ex)}
    return {"ok": True, "result": to_string(result)}


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None, prelude: str | None = 'auto'):
        default_host, default_port = get_repl_address()
        self.host = host or default_host
        self.port = port or default_port
        self.prelude = prelude

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("Listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("Client connected: %s:%d", *addr)
        interp = Interpreter(prelude=self.prelude)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = handle_request(interp, line.decode("utf-8", errors="replace"))
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.info("Client disconnected: %s:%d", *addr)


if __name__ == "__main__":
    configure_logging()
    ReplServer().serve_forever()
