import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from wordfinder.settings import settings

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordfinder")


def create_app() -> FastAPI:
    application = FastAPI(title="WordFinder")

    @application.get("/health")
    async def health():
        return {"status": "ok"}

    @application.post("/find")
    async def find(request: Request):
        from wordfinder.finder import WordFinder
        from wordfinder.matrix import InvalidMatrixError
        from wordfinder.metrics import StageTimer

        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")

        matrix = body.get("matrix")
        words = body.get("words")
        if matrix is not None and not isinstance(matrix, list):
            raise HTTPException(400, "'matrix' must be a list of strings")
        if words is not None and not isinstance(words, list):
            raise HTTPException(400, "'words' must be a list of strings")
        if matrix is not None and any(row is not None and not isinstance(row, str) for row in matrix):
            raise HTTPException(400, "'matrix' must be a list of strings")
        if words and len(words) > settings.MAX_STREAM_WORDS:
            raise HTTPException(413, f"Too many words (max {settings.MAX_STREAM_WORDS})")

        try:
            finder = WordFinder(matrix)
        except InvalidMatrixError as e:
            logger.warning("Rejected matrix: %s", e)
            raise HTTPException(400, str(e))

        # Non-string entries count as missing words
        if words is not None:
            words = [w if isinstance(w, str) else None for w in words]
        timer = StageTimer()
        found = finder.find(words, timer)
        logger.info("POST /find matrix=%r words=%d found=%d", finder.matrix, len(words or []), len(found))

        result = {
            "words": found,
            "word_count": len(found),
            "processing_time": timer.total_ms,
        }
        if settings.DEBUG:
            result["stage_timings"] = timer.summary()
        return JSONResponse(result)

    @application.get("/api/settings")
    async def api_get_settings():
        from wordfinder.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordfinder.settings import update_settings, get_editable_settings
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Request body must be a JSON object")
        errors = update_settings(settings, **body)
        if "LOG_LEVEL" in body and "LOG_LEVEL" not in errors:
            logging.getLogger().setLevel(settings.LOG_LEVEL)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
