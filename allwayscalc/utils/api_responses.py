"""JSON envelopes shared by every ``/api`` endpoint.

Success: ``{"success": true, "message": ..., "data": ...}``
Failure: ``{"success": false, "message": ..., "errors": {...}}``
"""

from typing import Any, Dict, List, Optional, Tuple

from flask import Response, jsonify, request

ResponseTuple = Tuple[Response, int]


class APIResponse:
    """Standardized API response handler"""

    @staticmethod
    def _send(body: Dict[str, Any], status_code: int) -> ResponseTuple:
        return jsonify(body), status_code

    @staticmethod
    def success(data: Any = None, message: str = "Success", status_code: int = 200) -> ResponseTuple:
        return APIResponse._send({"success": True, "message": message, "data": data}, status_code)

    @staticmethod
    def error(message: str, errors: Optional[Dict] = None, status_code: int = 400) -> ResponseTuple:
        return APIResponse._send({"success": False, "message": message, "errors": errors or {}}, status_code)

    @staticmethod
    def validation_error(errors: Dict[str, List[str]]) -> ResponseTuple:
        """422 with per-field messages straight from the form."""
        return APIResponse.error("Validation failed", errors=errors, status_code=422)

    @staticmethod
    def not_found(resource: str = "Resource") -> ResponseTuple:
        return APIResponse.error(f"{resource} not found", status_code=404)

    @staticmethod
    def upstream_failure(message: str) -> ResponseTuple:
        """502: a provider we depend on failed to answer."""
        return APIResponse.error(message, status_code=502)

    @staticmethod
    def unavailable(message: str) -> ResponseTuple:
        """503: the feature is switched off by configuration."""
        return APIResponse.error(message, status_code=503)

    @staticmethod
    def json_payload() -> Optional[Dict[str, Any]]:
        """Request body as a dict, or None when it is missing or not a JSON object"""
        payload = request.get_json(silent=True)
        return payload if isinstance(payload, dict) else None


__all__ = ["APIResponse"]
