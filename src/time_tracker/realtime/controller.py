from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/changes", endpoint="api_changes")
    @login_required
    def api_changes():
        """Events published since `since`, optionally for one table."""
        since_s = request.args.get("since", "0")
        table = request.args.get("table") or None
        try:
            since = int(since_s)
            events = container.change_feed.events_since(since, table=table)
        except ValueError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify(
            {
                "success": True,
                "events": [e.to_dict() for e in events],
                "last_seq": container.change_feed.last_seq,
            }
        )
