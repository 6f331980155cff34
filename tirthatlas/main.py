"""Entry: start the catalog API server."""
import logging
import uvicorn

from tirthatlas.config import API_HOST, API_PORT, LOG_LEVEL

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(message)s")
    uvicorn.run(
        "tirthatlas.api.app:app",
        host=API_HOST,
        port=API_PORT,
        reload=True,
    )
