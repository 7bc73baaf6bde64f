from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        data = container.dashboard_service.build(container.store.list_subjects())
        return jsonify(
            {
                "overall": asdict(data.overall),
                "subject_count": data.subject_count,
                "cards": data.cards,
                "ranked": data.ranked,
                "alerts": data.alerts,
                "compliance_status": data.compliance_status,
                "insights": [
                    {"kind": i.kind.value, "title": i.title, "message": i.message} for i in data.insights
                ],
            }
        )

    @app.route("/api/alerts", methods=["GET"], endpoint="alerts")
    def alerts():
        return jsonify({"alerts": container.monitor.alerts})
