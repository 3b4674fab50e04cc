import logging
import os
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.orm import Session

from writecheck.db.kv_store import (
    clear_workspace,
    get_theme,
    load_workspace,
    save_workspace,
    set_theme,
)
from writecheck.db.session import get_db
from writecheck.models.pydantic import (
    AnalyseRequest,
    AnalyseResponse,
    DraftRequest,
    QuickCheckResponse,
    ReportRequest,
    ThemePreference,
    WorkspaceState,
)
from writecheck.services.analysis import analyze_draft, compute_metrics
from writecheck.services.errors import FeedbackError, InputValidationError
from writecheck.services.feedback import MAX_CRITERIA, FeedbackService, build_feedback_report
from writecheck.services.feedback.report import report_filename

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
feedback_service = FeedbackService()


def _error_response(error: FeedbackError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error", "code": "INTERNAL_ERROR"},
    )


# einfacher Health-Check
@router.get("/health")
async def health():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "hasApiKey": bool(os.getenv("OPENAI_API_KEY")),
    }


# deterministische Analyse, kein LLM
@router.post("/analysis")
def analysis(req: DraftRequest):
    return analyze_draft(req.draft).to_dict()


# bewertet den Draft gegen die Erfolgskriterien
@router.post("/analyse", response_model=AnalyseResponse)
def analyse(req: AnalyseRequest):
    try:
        result = feedback_service.analyse(req.draft, req.criteria)
        return AnalyseResponse(data=result)
    except FeedbackError as e:
        logger.warning("Analysis failed (%s): %s", e.code, e.message)
        return _error_response(e)
    except Exception:
        logger.exception("Analysis error")
        return _internal_error()


@router.post("/quick-check", response_model=QuickCheckResponse)
def quick_check(req: DraftRequest):
    try:
        result = feedback_service.quick_check(req.draft)
        return QuickCheckResponse(data=result)
    except FeedbackError as e:
        logger.warning("Quick check failed (%s): %s", e.code, e.message)
        return _error_response(e)
    except Exception:
        logger.exception("Quick check error")
        return _internal_error()


# Feedback-Report als Text-Datei
@router.post("/report")
def report(req: ReportRequest):
    now = datetime.now()
    body = build_feedback_report(
        draft=req.draft,
        metrics=compute_metrics(req.draft),
        result=req.result,
        generated_at=now,
    )
    return PlainTextResponse(
        body,
        headers={"Content-Disposition": f'attachment; filename="{report_filename(now.date())}"'},
    )


@router.get("/workspace", response_model=WorkspaceState)
def get_workspace(db: Session = Depends(get_db)):
    return load_workspace(db) or WorkspaceState()


@router.put("/workspace", response_model=WorkspaceState)
def put_workspace(state: WorkspaceState, db: Session = Depends(get_db)):
    if len(state.criteria) > MAX_CRITERIA:
        return _error_response(
            InputValidationError(f"Maximum {MAX_CRITERIA} success criteria allowed", field="criteria")
        )
    return save_workspace(db, state.draft, state.criteria)


# "Clear all": Theme bleibt erhalten
@router.delete("/workspace")
def delete_workspace(db: Session = Depends(get_db)):
    clear_workspace(db)
    return {"cleared": True}


@router.get("/theme", response_model=ThemePreference)
def read_theme(db: Session = Depends(get_db)):
    return ThemePreference(theme=get_theme(db))


@router.put("/theme", response_model=ThemePreference)
def write_theme(pref: ThemePreference, db: Session = Depends(get_db)):
    return ThemePreference(theme=set_theme(db, pref.theme))
