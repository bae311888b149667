"""
Run the Dhivyuga API with uvicorn: ``python -m dhivyuga.server``.
"""

import uvicorn

from .core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "dhivyuga.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )
