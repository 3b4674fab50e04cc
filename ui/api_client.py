"""API Client für das writecheck Backend."""

import os
from typing import Any

import requests

API_BASE_URL = os.getenv("WRITECHECK_API_BASE_URL", "http://localhost:8000")
TIMEOUT = 120  # AI-Feedback kann mit vielen Kriterien länger dauern


def health_check() -> dict[str, Any]:
    """Prüft ob API erreichbar ist und ob ein API-Key konfiguriert ist."""
    try:
        response = requests.get(f"{API_BASE_URL}/api/health", timeout=5)
        if response.status_code == 200:
            data = response.json()
            return {"available": True, "has_api_key": data.get("hasApiKey", False)}
        return {"available": False, "message": f"Status {response.status_code}"}
    except requests.exceptions.RequestException as e:
        return {"available": False, "message": str(e)}


def _post(path: str, payload: dict[str, Any]) -> dict[str, Any]:
    """
    POST an die API.

    Returns:
        {"success": True, "data": ...} oder
        {"success": False, "error": ..., "code": ...}; code ist z.B. AUTH_ERROR,
        damit die UI "API-Key prüfen" statt "nochmal versuchen" anzeigen kann
    """
    try:
        response = requests.post(f"{API_BASE_URL}{path}", json=payload, timeout=TIMEOUT)
    except requests.exceptions.RequestException as e:
        return {"success": False, "error": str(e), "code": "CONNECTION_ERROR"}

    try:
        body = response.json()
    except ValueError:
        return {
            "success": False,
            "error": f"HTTP {response.status_code}: {response.text}",
            "code": "HTTP_ERROR",
        }

    if response.ok:
        return body
    return {
        "success": False,
        "error": body.get("error", f"HTTP {response.status_code}"),
        "code": body.get("code", "HTTP_ERROR"),
    }


def analyse(draft: str, criteria: list[str]) -> dict[str, Any]:
    return _post("/api/analyse", {"draft": draft, "criteria": criteria})


def quick_check(draft: str) -> dict[str, Any]:
    return _post("/api/quick-check", {"draft": draft})


def download_report(draft: str, result: dict[str, Any]) -> str | None:
    """Holt den Feedback-Report als Text; None bei Fehler."""
    try:
        response = requests.post(
            f"{API_BASE_URL}/api/report",
            json={"draft": draft, "result": result},
            timeout=30,
        )
        response.raise_for_status()
        return response.text
    except requests.exceptions.RequestException:
        return None


def load_workspace() -> dict[str, Any] | None:
    try:
        response = requests.get(f"{API_BASE_URL}/api/workspace", timeout=5)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException:
        return None


def save_workspace(draft: str, criteria: list[str]) -> bool:
    try:
        response = requests.put(
            f"{API_BASE_URL}/api/workspace",
            json={"draft": draft, "criteria": criteria},
            timeout=5,
        )
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False


def clear_workspace() -> bool:
    try:
        response = requests.delete(f"{API_BASE_URL}/api/workspace", timeout=5)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False


def get_theme() -> str:
    try:
        response = requests.get(f"{API_BASE_URL}/api/theme", timeout=5)
        if response.status_code == 200:
            return response.json().get("theme", "light")
    except requests.exceptions.RequestException:
        pass
    return "light"


def set_theme(theme: str) -> bool:
    try:
        response = requests.put(f"{API_BASE_URL}/api/theme", json={"theme": theme}, timeout=5)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False
