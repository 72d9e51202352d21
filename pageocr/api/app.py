from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pageocr.api.routes import document_routes, ocr_routes
from pageocr.config.settings import Settings
from pageocr.processor.processor import Processor, build_processor
from pageocr.store.document_store import DocumentQueueStore
from pageocr.worker.document_runner import DocumentRunner
from pageocr.worker.worker import Worker


def create_app(
    settings: Settings,
    *,
    store: DocumentQueueStore | None = None,
    processor: Processor | None = None,
    run_worker: bool = True,
) -> FastAPI:
    """Build the API with its store, processor and background worker."""
    store = store if store is not None else DocumentQueueStore()
    processor = processor if processor is not None else build_processor(settings)
    worker = Worker(store, DocumentRunner(processor, store), settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        if run_worker:
            worker.start_background()
        try:
            yield
        finally:
            if run_worker:
                worker.stop(timeout=5)

    app = FastAPI(title="PDF Page OCR", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.processor = processor
    app.state.worker = worker

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(ocr_routes.router, prefix="/api")
    app.include_router(document_routes.router, prefix="/api")
    return app
