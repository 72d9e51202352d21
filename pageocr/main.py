import uvicorn

from pageocr.api.app import create_app
from pageocr.config.settings import Settings
from pageocr.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    Log.info(f"Starting pageocr ({settings.app_env}) on {settings.api_host}:{settings.api_port}")
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
