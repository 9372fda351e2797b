"""
API module
==========

FastAPI service: ``POST /extract`` takes one uploaded workbook and returns the
combined workbook as an attachment; ``GET /health`` is a liveness probe.
"""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from roster_merge.config import get_settings
from roster_merge.errors import InputMissingError
from roster_merge.logger import PROJECT_LOGGER, get_logger
from roster_merge.pipeline import consolidate
from roster_merge.tables.config import XLSX_MEDIA_TYPE, load_header_phrases

logger = get_logger(f"{PROJECT_LOGGER}.api")

NO_FILE_MESSAGE = 'No file uploaded. Use form-data with key "file".'

app = FastAPI(title="Roster Merge Service")


@app.post("/extract")
def extract_endpoint(file: Optional[UploadFile] = File(default=None)):
    """Consolidate the uploaded workbook and return it as ``combined_output.xlsx``."""
    if file is None:
        return JSONResponse(status_code=400, content={"error": NO_FILE_MESSAGE})

    settings = get_settings()
    try:
        payload = file.file.read()
        phrases = load_header_phrases(settings.HEADER_PHRASES_PATH)
        result = consolidate(payload, phrases=phrases, sheet_name=settings.OUTPUT_SHEET_NAME)
    except InputMissingError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc) or NO_FILE_MESSAGE})
    except Exception as exc:
        logger.error("Error processing %s: %s", file.filename, exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) or "Failed to process Excel file"},
        )

    logger.info(
        "Processed %s: %d table(s), %d row(s)",
        file.filename, result.table_count, result.row_count,
    )
    return Response(
        content=result.content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{settings.OUTPUT_FILENAME}"'},
    )


@app.get("/health")
def health():
    return {"status": "ok"}


def _mount_static(application: FastAPI) -> None:
    static_dir = get_settings().STATIC_DIR
    if not static_dir:
        return
    path = Path(static_dir).expanduser()
    if not path.is_dir():
        logger.warning("STATIC_DIR %s is not a directory; static files disabled", path)
        return
    # Mounted last so it never shadows the API routes.
    application.mount("/", StaticFiles(directory=str(path), html=True), name="static")


_mount_static(app)


def main() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("Server running on http://%s:%d", settings.API_HOST, settings.API_PORT)
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    main()
