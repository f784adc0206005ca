"""
HTTP upload endpoint and browser form for the translation pipeline.
"""

import argparse
import logging
from functools import lru_cache

import uvicorn
from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import PipelineConfig, setup_logging
from .errors import DubbingError, InputMissing
from .pipeline import VideoTranslator

logger = logging.getLogger("vidtranslate")

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Video Translation</title>
</head>
<body style="padding: 2rem; font-family: Arial, sans-serif;">
  <h1>Video Translation (EN&harr;HI)</h1>
  <form id="translate-form">
    <div style="margin-bottom: 1rem;">
      <label for="video">Select Video:</label>
      <input id="video" name="video" type="file" accept="video/*">
    </div>
    <div style="margin-bottom: 1rem;">
      <label for="lang">Translate to:</label>
      <select id="lang" name="targetLang">
        <option value="hi" selected>Hindi</option>
        <option value="en">English</option>
      </select>
    </div>
    <button id="submit" type="submit" disabled>Translate</button>
  </form>
  <p id="status" style="margin-top: 1rem;"></p>
  <div id="result" style="margin-top: 1rem;"></div>
  <script>
    const form = document.getElementById("translate-form");
    const fileInput = document.getElementById("video");
    const button = document.getElementById("submit");
    const status = document.getElementById("status");
    const result = document.getElementById("result");
    fileInput.addEventListener("change", () => { button.disabled = !fileInput.files.length; });
    form.addEventListener("submit", async (e) => {
      e.preventDefault();
      if (!fileInput.files.length) return;
      status.textContent = "Status: Uploading…";
      result.innerHTML = "";
      const data = new FormData();
      data.append("video", fileInput.files[0]);
      data.append("targetLang", document.getElementById("lang").value);
      try {
        const res = await fetch("/api/translate", { method: "POST", body: data });
        const body = await res.json();
        if (body.error) {
          status.textContent = `Status: Error: ${body.error}`;
        } else {
          status.textContent = "Status: Complete";
          const link = document.createElement("a");
          link.href = body.url;
          link.download = "translated_video";
          link.textContent = "Download Result";
          result.appendChild(link);
        }
      } catch (err) {
        status.textContent = "Status: Request failed";
      }
    });
  </script>
</body>
</html>
"""

app = FastAPI(
    title="Video Translation API",
    description="Replace the spoken audio of a short video with speech in another language",
    version=__version__,
)


@lru_cache(maxsize=1)
def get_translator() -> VideoTranslator:
    """Translator built once from the process environment."""
    return VideoTranslator(PipelineConfig.from_env())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework errors (405, 404, ...) in the same {error} shape."""
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed form fields get the same {error} shape as pipeline failures."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=422,
        content={"error": f"Invalid request: {problems or 'malformed form data'}", "code": "invalid_request"},
    )


@app.get("/", response_class=HTMLResponse)
async def index() -> str:
    return INDEX_HTML


@app.post("/api/translate")
async def translate_video(
    video: UploadFile | None = File(None),
    targetLang: str | None = Form(None),
    translator: VideoTranslator = Depends(get_translator),
):
    """Accept a video upload and return the dubbed video as a data URL."""
    try:
        if video is None:
            raise InputMissing("No video file provided")
        data = await video.read()
        logger.info(f"Received {video.filename}, {len(data)} bytes (targetLang={targetLang or 'default'})")
        result = await run_in_threadpool(
            translator.translate, data, targetLang, filename=video.filename
        )
    except DubbingError as e:
        logger.error(f"Request failed ({e.code}): {e}")
        return JSONResponse(status_code=e.status_code, content={"error": str(e), "code": e.code})
    return {"url": result.url}


def main() -> None:
    """Serve the API with uvicorn."""
    ap = argparse.ArgumentParser(description="Video translation HTTP server")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = ap.parse_args()
    setup_logging(args.verbose)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
