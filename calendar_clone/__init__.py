import logging
from datetime import date

from flask import Flask, Response, jsonify, request

from .config import CalendarConfig
from .exceptions import ExportError, IngestionError
from .ingestion.ics_reader import ICSReader, import_ics
from .output.ics_writer import ICSWriter, export_filename
from .storage.event_store import EventStore

logger = logging.getLogger(__name__)


def create_app(config: CalendarConfig | None = None):
    config = config or CalendarConfig.from_env()
    store = EventStore(config.store_path)
    writer = ICSWriter(prodid=config.prodid, uid_domain=config.uid_domain)
    reader = ICSReader()

    app = Flask(__name__)

    @app.route("/events", methods=["GET"])
    def list_events():
        return jsonify([event.model_dump(mode="json") for event in store.load()])

    @app.route("/export", methods=["GET"])
    def export_calendar():
        """Download all stored events as an ICS file."""
        try:
            ics_content = writer.render(store.load())
        except ExportError as e:
            logger.error(f"Export failed: {e}")
            return (str(e), 500)

        filename = export_filename(date.today())
        return Response(
            ics_content,
            content_type="text/calendar; charset=utf-8",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/import", methods=["POST"])
    def import_calendar():
        """Decode an uploaded ICS file and append its events."""
        upload = request.files.get("file")
        if not upload:
            return ("No file", 400)

        imported = []
        try:
            import_ics(upload.read(), imported.extend, reader=reader)
        except IngestionError as e:
            return (str(e), 400)

        count = store.extend(imported)
        return jsonify({"status": "success", "imported": count})

    return app
