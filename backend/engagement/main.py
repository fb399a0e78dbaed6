"""
Main FastAPI application and routing layer.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from engagement.config import (
    CORS_ALLOW_ORIGINS,
    LOG_FORMAT,
    LOG_LEVEL,
    MAX_UPLOAD_BYTES,
    MAX_UPLOAD_MB,
    SUGGESTION_RULE_SET,
)
from engagement.extraction.common import ExtractionError, UnsupportedDocumentError
from engagement.extraction.extractor import DocumentExtractor
from engagement.models import RuleSet
from engagement.schemas import AnalyzeRequest, AnalyzeResponse, RuleSetName
from engagement.utils import build_analyze_response, now_utc

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def resolve_rule_set(requested: Optional[str]) -> RuleSet:
    """Use the requested rule set, or the configured default when none is given."""
    return RuleSet(requested or SUGGESTION_RULE_SET)


# Initialize FastAPI app
app = FastAPI(
    title="Post Engagement Analyzer API",
    version="0.1.0",
    description="API for extracting text from documents and scoring its social media engagement potential"
)

extractor = DocumentExtractor()


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/ping")
async def ping():
    return {"ok": True}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "as_of": now_utc().isoformat(),
        "service": "engagement-analyzer-api"
    }


@app.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze_text(payload: AnalyzeRequest):
    """
    Analyze text that the client already has.

    Args:
        payload: Text and optional rule set

    Returns:
        AnalyzeResponse with analysis and suggestions
    """
    rule_set = resolve_rule_set(payload.rule_set)
    logger.info("Analyzing %d characters of submitted text (%s rules)", len(payload.text), rule_set.value)
    return build_analyze_response(payload.text, rule_set)


@app.post("/api/upload", response_model=AnalyzeResponse)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    rule_set: Optional[RuleSetName] = Query(None, description="Suggestion rule set: minimal or extended"),
):
    """
    Extract text from an uploaded PDF, image or text file and analyze it.

    Args:
        file: Uploaded document (multipart field ``file``)
        rule_set: Suggestion rule set, defaults to SUGGESTION_RULE_SET

    Returns:
        AnalyzeResponse with extracted text, analysis and suggestions
    """
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        content = await file.read(MAX_UPLOAD_BYTES + 1)
        if len(content) > MAX_UPLOAD_BYTES:
            raise HTTPException(status_code=413, detail=f"File exceeds {MAX_UPLOAD_MB} MB limit")

        text = await extractor.extract(content, file.filename, file.content_type)

        resolved = resolve_rule_set(rule_set)
        logger.info("Analyzing %d characters extracted from %s (%s rules)", len(text), file.filename, resolved.value)
        return build_analyze_response(text, resolved)

    except HTTPException:
        raise
    except UnsupportedDocumentError as e:
        logger.warning(f"Rejected upload {file.filename}: {e}")
        raise HTTPException(status_code=415, detail=str(e))
    except ExtractionError as e:
        logger.warning(f"Extraction failed for {file.filename}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Error processing upload {file.filename}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
    finally:
        await file.close()


if __name__ == "__main__":
    # For development
    import uvicorn
    from engagement.settings import settings
    uvicorn.run("engagement.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
