from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import domain_error_response, json_body, unexpected_error_response
from ..common.time_utils import DURATION_OPTIONS, TIME_OPTIONS
from ..common.timezones import TIMEZONE_OPTIONS
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/jobs/options", methods=["GET"], endpoint="api_job_options")
    def api_job_options():
        return jsonify(
            {
                "time_options": TIME_OPTIONS,
                "duration_options": DURATION_OPTIONS,
                "timezone_options": TIMEZONE_OPTIONS,
            }
        )

    @app.route("/api/jobs", methods=["POST"], endpoint="api_create_job")
    def api_create_job():
        try:
            job_id = container.job_service.create(json_body())
            return jsonify({"success": True, "job_id": job_id}), 201
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("creating job")

    @app.route("/api/jobs/<int:job_id>/confirm", methods=["POST"], endpoint="api_confirm_interpreter")
    def api_confirm_interpreter(job_id: int):
        try:
            billable_hours = container.job_service.confirm_interpreter(
                job_id=job_id,
                interpreter_id=json_body().get("interpreter_id"),
            )
            return jsonify({"success": True, "billable_hours": billable_hours})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("confirming interpreter")

    @app.route("/api/jobs/auto-complete", methods=["POST"], endpoint="api_auto_complete_jobs")
    def api_auto_complete_jobs():
        try:
            result = container.job_service.auto_complete()
        except Exception:
            return unexpected_error_response("auto-completing jobs")

        message = f"Auto-completed {result.updated} jobs" if result.updated else "No jobs to auto-complete"
        return jsonify({"success": True, "message": message, "updated": result.updated, "jobs": result.job_numbers})
