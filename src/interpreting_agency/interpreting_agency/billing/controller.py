from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import domain_error_response, json_body, unexpected_error_response
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/billing/preview", methods=["POST"], endpoint="api_billing_preview")
    def api_billing_preview():
        """Live estimate for the job form; numeric junk counts as 0."""
        try:
            preview = container.billing_service.preview(json_body())
        except Exception:
            return unexpected_error_response("computing billing preview")

        if preview is None:
            return jsonify({"success": False, "message": "Start and end time must be HH:MM"}), 400
        return jsonify({"success": True, "preview": preview.as_dict()})

    @app.route("/api/jobs/<int:job_id>/billing", methods=["GET"], endpoint="api_job_billing")
    def api_job_billing(job_id: int):
        try:
            preview = container.billing_service.preview_job(job_id)
            return jsonify({"success": True, "preview": preview.as_dict()})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("computing job billing")

    @app.route("/api/jobs/<int:job_id>/billing", methods=["POST"], endpoint="api_generate_billing")
    def api_generate_billing(job_id: int):
        try:
            result = container.billing_service.generate_billing(job_id)
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("generating billing")

        return jsonify(
            {
                "success": True,
                "message": "Invoice and interpreter bill have been created. Job status updated to Ready to Bill.",
                "invoice_id": result.invoice_id,
                "bill_id": result.bill_id,
                "billable_hours": result.totals.billable_hours,
                "facility_billable_total": round(result.totals.facility_billable_total, 2),
                "interpreter_billable_total": round(result.totals.interpreter_billable_total, 2),
            }
        )
