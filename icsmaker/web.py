"""Flask app serving rendered calendars over HTTP."""

import logging
import os

from flask import Flask, Response, jsonify, request

from icsmaker.calendar_builder import load_calendar_options
from icsmaker.config import CalendarConfig
from icsmaker.exceptions import InvalidOptionsError
from icsmaker.output.formatter import ICSFormatter

logger = logging.getLogger(__name__)


def create_app(config: CalendarConfig | None = None):
    app = Flask(__name__)
    calendar_config = config or CalendarConfig.from_env()

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/calendar", methods=["POST"])
    def render_calendar():
        """Render the posted calendar options as a downloadable .ics file."""
        options = request.get_json(silent=True)
        if not isinstance(options, dict):
            return ("Expected a JSON object with calendar options", 400)

        try:
            calendar = load_calendar_options(options, config=calendar_config)
        except InvalidOptionsError as e:
            logger.warning(f"Rejected calendar options: {e}")
            return (str(e), 400)

        ical_content = ICSFormatter(calendar_config.line_break).format_calendar(calendar)
        filename = os.path.basename(calendar.file_path)

        return Response(
            ical_content,
            content_type="text/calendar; charset=utf-8",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    return app
