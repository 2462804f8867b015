import logging
import os
import socket

from param_browser.logging_config import configure_logging
from param_browser.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("param_browser.app")

app = create_dash_app(os.getenv("CONFIG_ROOT", "config"))
server = app.server


def find_free_port(start_port: int, attempts: int = 100) -> int:
    """First port from start_port that nothing is listening on."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", "8051"))
    final_port = find_free_port(preferred_port)

    debug = os.getenv("DEBUG", "0") == "1"

    if final_port != preferred_port:
        logger.warning(
            "Preferred port taken",
            extra={"preferred_port": preferred_port, "port": final_port},
        )

    logger.info("Starting server", extra={"port": final_port, "debug": debug})
    app.run(host="0.0.0.0", port=final_port, debug=debug)
