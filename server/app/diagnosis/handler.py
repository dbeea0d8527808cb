import logging
from typing import Any, Dict, Sequence

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.types import Receive, Scope, Send

from app.diagnosis.rules import DEFAULT_RULES, classify
from app.schemas.models import DiagnoseRequest, DiagnosisResult, DiagnosisRule, ErrorResponse
from app.utils.text import decode_json_or_default, has_bearer_token

log = logging.getLogger("diagnosis")

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

def json_response(data: Any, status_code: int = 200) -> JSONResponse:
    # JSONResponse sets Content-Type: application/json itself
    return JSONResponse(content=data, status_code=status_code, headers=dict(CORS_HEADERS))

class DiagnosisHandler:
    """
    Request-scoped handler for the diagnosis endpoint.

    OPTIONS is always answered as a CORS preflight, POST is classified,
    anything else gets a 405. Holds only immutable configuration, so one
    instance serves concurrent requests.

    Instances are ASGI apps, so a route built around one matches every HTTP
    method and the 405 answer always comes from here.
    """

    def __init__(self, require_auth: bool = False, rules: Sequence[DiagnosisRule] = DEFAULT_RULES):
        self.require_auth = require_auth
        self.rules = tuple(rules)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = await self.handle(Request(scope, receive))
        await response(scope, receive, send)

    async def handle(self, request: Request) -> Response:
        if request.method == "OPTIONS":
            return PlainTextResponse("ok", status_code=200, headers=dict(CORS_HEADERS))

        try:
            if request.method != "POST":
                log.warning("Rejected method=%s", request.method)
                return json_response(ErrorResponse(error="Method not allowed").model_dump(), 405)

            has_bearer = has_bearer_token(request.headers.get("authorization"))
            if self.require_auth and not has_bearer:
                log.warning("Rejected request without bearer token")
                return json_response(
                    ErrorResponse(error="Unauthorized (missing Bearer token)").model_dump(), 401
                )

            raw = await request.body()
            payload = decode_json_or_default(raw, default={})
            req = DiagnoseRequest.from_payload(payload)
            rule = classify(req.description, self.rules)
            log.info("Diagnosis branch=%s desc_len=%d auth_present=%s", rule.name, len(req.description), has_bearer)

            result = DiagnosisResult(
                auth_present=has_bearer,
                summary=rule.summary,
                confidence=rule.confidence,
                actions=list(rule.actions),
            )
            return json_response(result.model_dump())
        except Exception as e:
            log.exception("Diagnosis failed.")
            return json_response(ErrorResponse(error=str(e)).model_dump(), 500)
