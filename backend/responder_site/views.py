"""
Example endpoints, one per envelope status.

  GET  /health                     - success
  POST /jobs                       - pending (202, job queued)
  GET  /orders/:order_id           - success, or Http404 for unknown orders
  POST /orders/:order_id/approve   - rejected (409 when already approved)
  GET  /upstream                   - failed (502, upstream unreachable)
  GET  /crash                      - unhandled exception → error envelope
  GET  /legacy                     - shortcut helper without the middleware builder
"""
from __future__ import annotations

import uuid

from django.http import Http404
from django.views.decorators.http import require_http_methods

from responder import StatusCode
from responder.response import api_error, api_response

KNOWN_ORDERS = {"ord-1", "ord-2"}
APPROVED_ORDERS = {"ord-1"}


@require_http_methods(["GET"])
def health(request):
    return request.responder.message("OK").data({"healthy": True}).success()


@require_http_methods(["POST"])
def submit_job(request):
    job_id = str(uuid.uuid4())
    return (
        request.responder.code(StatusCode.ACCEPTED)
        .message("Job queued")
        .data({"job_id": job_id})
        .headers({"Location": f"/jobs/{job_id}"})
        .pending()
    )


@require_http_methods(["GET"])
def order_detail(request, order_id):
    if order_id not in KNOWN_ORDERS:
        raise Http404(f"No order {order_id}")
    return request.responder.data({"order_id": order_id, "approved": order_id in APPROVED_ORDERS}).success()


@require_http_methods(["POST"])
def approve_order(request, order_id):
    if order_id in APPROVED_ORDERS:
        return (
            request.responder.code(StatusCode.CONFLICT)
            .message("Order already approved")
            .errors([{"code": "already_approved", "order_id": order_id}])
            .rejected()
        )
    return request.responder.data({"order_id": order_id, "approved": True}).success()


@require_http_methods(["GET"])
def upstream(request):
    return (
        request.responder.code(StatusCode.BAD_GATEWAY)
        .message("Upstream service unavailable")
        .meta({"retry_after": 30})
        .failed()
    )


@require_http_methods(["GET"])
def crash(request):
    raise RuntimeError("boom")


@require_http_methods(["GET"])
def legacy(request):
    if request.GET.get("fail"):
        return api_error(code=StatusCode.UNPROCESSABLE_ENTITY, errors=[{"field": "fail"}])
    return api_response(data=[1, 2, 3], meta={"count": 3})
