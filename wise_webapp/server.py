"""Flask app serving the Wise webapp front end and its /api/data endpoint."""
from urllib.parse import quote

from flask import Flask, make_response, request
from werkzeug.exceptions import NotFound
from werkzeug.serving import WSGIRequestHandler, make_server

from .config import load_settings
from .data import PRODUCT_SUMMARY_JSON
from .routing import API, resolve_target
from .static_files import resolve

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"
TEXT_CONTENT_TYPE = "text/plain; charset=UTF-8"
NOT_FOUND_BODY = "404 Not Found"


def request_url():
    """The request target as the client sent it, query string included."""
    raw = request.environ.get("RAW_URI") or request.environ.get("REQUEST_URI")
    if raw:
        return raw
    url = quote(request.path)
    if request.query_string:
        url += "?" + request.query_string.decode("latin-1")
    return url


def create_app(static_root=None):
    if static_root is None:
        static_root = load_settings().static_root

    # No URL rules: every request, whatever its method, is answered by
    # dispatch before Flask gets to routing
    app = Flask(__name__, static_folder=None)
    app.config["STATIC_ROOT"] = static_root

    @app.before_request
    def dispatch():
        target = resolve_target(request_url())
        if target.kind == API:
            response = make_response(PRODUCT_SUMMARY_JSON)
            response.headers["Content-Type"] = JSON_CONTENT_TYPE
            return response

        static_file = resolve(app.config["STATIC_ROOT"], target.path)
        response = make_response(static_file.content)
        response.headers["Content-Type"] = static_file.content_type
        return response

    @app.errorhandler(NotFound)
    def not_found(error):
        response = make_response(NOT_FOUND_BODY, 404)
        response.headers["Content-Type"] = TEXT_CONTENT_TYPE
        return response

    return app


class QuietRequestHandler(WSGIRequestHandler):
    def log_request(self, *args, **kwargs):
        pass


def main():
    settings = load_settings()
    app = create_app(settings.static_root)
    server = make_server(settings.host, settings.port, app, threaded=True,
                         request_handler=QuietRequestHandler)
    print(f"Wise webapp server listening on port {settings.port}")
    server.serve_forever()


if __name__ == "__main__":
    main()
