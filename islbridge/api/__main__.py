"""Allow running the API with: python -m islbridge.api"""

import uvicorn

from .dependencies import get_settings


def main():
    """Run the API server."""
    config = get_settings()
    uvicorn.run(
        "islbridge.api.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.debug,
        log_level=config.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
