from __future__ import annotations
import sys
import uvicorn
from gpm.infrastructure.config import Settings, get_settings
from gpm.interface.app import create_app
from gpm.services.catalog import Catalog

def serve(catalog: Catalog, settings: Settings | None = None, log_level: str | None = None) -> None:
    """Start the uvicorn ASGI server over an already scanned catalog."""
    settings = settings or get_settings()
    uvicorn.run(
        create_app(catalog),
        host=settings.host,
        port=settings.port,
        log_level=(log_level or settings.log_level).lower(),
    )


def main() -> None:
    """Console entry point."""
    from gpm.interface.cli import run

    sys.exit(run())


if __name__ == "__main__":
    main()
