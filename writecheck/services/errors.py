"""
Fehler-Taxonomie für den Feedback-Orchestrator.

- InputValidationError: Draft/Criteria ungültig, wird VOR jedem Netzwerk-Call erkannt
- UpstreamProtocolError: LLM-Antwort passt nicht zum erwarteten JSON-Schema
- TransportError: Netzwerkfehler oder Non-Success-Status des LLM-Dienstes
- AuthError: fehlender/ungültiger API-Key (eigene Klasse, damit die UI
  "API-Key prüfen" statt "nochmal versuchen" anzeigen kann)

Keiner dieser Fehler wird automatisch wiederholt.
"""

from typing import Any


class FeedbackError(Exception):
    """Basisklasse aller Orchestrator-Fehler."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Body für die API-Antwort."""
        body: dict[str, Any] = {
            "success": False,
            "error": self.message,
            "code": self.code,
        }
        if self.details:
            body["details"] = self.details
        return body


class InputValidationError(FeedbackError):
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message,
            code="VALIDATION_ERROR",
            status_code=400,
            details={"field": field} if field else None,
        )


class UpstreamProtocolError(FeedbackError):
    """
    Der LLM-Dienst hat geantwortet, aber nicht im vereinbarten Format.
    Der Roh-Output bleibt in `raw` erhalten (nur für Logs, nicht für die API).
    """

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message, code="UPSTREAM_PROTOCOL", status_code=502)
        self.raw = raw


class TransportError(FeedbackError):
    def __init__(self, message: str, status_code: int = 502, upstream_status: int | None = None):
        super().__init__(
            message,
            code="TRANSPORT_ERROR",
            status_code=status_code,
            details={"upstream_status": upstream_status} if upstream_status else None,
        )


class AuthError(FeedbackError):
    def __init__(self, message: str = "Invalid OpenAI API key"):
        super().__init__(message, code="AUTH_ERROR", status_code=401)
