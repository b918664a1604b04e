"""
Frontend routes.

Production serves the built single-page app from FRONTEND_DIST_DIR.
Development forwards every non-API request, WebSocket hot-reload traffic
included, to the local Vite dev server.
"""
import logging
import threading
from pathlib import Path

import httpx
from flask import Blueprint, Response, abort, current_app, jsonify, request, send_from_directory
from simple_websocket import Client, ConnectionClosed
from werkzeug.security import safe_join

from app import sock

logger = logging.getLogger(__name__)

frontend_bp = Blueprint('frontend', __name__)

PROXY_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE']

# Headers that describe a single connection and must not be forwarded.
HOP_BY_HOP_HEADERS = {
    'connection',
    'keep-alive',
    'proxy-authenticate',
    'proxy-authorization',
    'te',
    'trailers',
    'transfer-encoding',
    'upgrade',
    'host',
    'content-length',
    'content-encoding',
}

WS_CLOSE_INTERNAL_ERROR = 1011


def _dev_server_url(scheme: str, path: str) -> str:
    url = f"{scheme}://localhost:{current_app.config['FRONTEND_PORT']}/{path}"
    if request.query_string:
        url = f"{url}?{request.query_string.decode('latin-1')}"
    return url


def _forwardable(headers) -> dict:
    return {k: v for k, v in headers.items() if k.lower() not in HOP_BY_HOP_HEADERS}


def proxy_to_dev_server(path: str) -> Response:
    """Forward the current request to the dev server and relay its response."""
    url = _dev_server_url('http', path)
    try:
        upstream = httpx.request(
            request.method,
            url,
            headers=_forwardable(request.headers),
            content=request.get_data(),
            follow_redirects=False
        )
    except httpx.RequestError as e:
        logger.warning(f"Dev server unreachable at {url}: {e}")
        return jsonify({
            'error': 'Bad Gateway',
            'message': f"Development server not reachable on port {current_app.config['FRONTEND_PORT']}"
        }), 502

    return Response(
        upstream.content,
        status=upstream.status_code,
        headers=_forwardable(upstream.headers)
    )


def serve_built_frontend(path: str):
    """Serve a file from the build output, falling back to index.html."""
    dist_dir = Path(current_app.config['FRONTEND_DIST_DIR'])
    if not (dist_dir / 'index.html').is_file():
        return Response("Frontend not built. Run make build first.", status=404, mimetype='text/plain')

    if path:
        candidate = safe_join(str(dist_dir), path)
        if candidate is not None and Path(candidate).is_file():
            return send_from_directory(dist_dir, path)

    return send_from_directory(dist_dir, 'index.html')


@frontend_bp.route('/', defaults={'path': ''}, methods=PROXY_METHODS)
@frontend_bp.route('/<path:path>', methods=PROXY_METHODS)
def frontend(path: str):
    """Serve or proxy any non-API path."""
    if path == 'api' or path.startswith('api/'):
        abort(404)

    if current_app.config['DEV_MODE']:
        return proxy_to_dev_server(path)

    if request.method not in ('GET', 'HEAD'):
        abort(405)

    return serve_built_frontend(path)


def relay_websocket(ws, upstream) -> None:
    """
    Pump frames between two open WebSockets until either side closes.
    Upstream frames are relayed on a helper thread.
    """
    def pump_upstream():
        try:
            while True:
                ws.send(upstream.receive())
        except ConnectionClosed:
            pass
        finally:
            try:
                ws.close()
            except ConnectionClosed:
                pass

    thread = threading.Thread(target=pump_upstream, daemon=True)
    thread.start()

    try:
        while True:
            upstream.send(ws.receive())
    except ConnectionClosed:
        pass
    finally:
        try:
            upstream.close()
        except ConnectionClosed:
            pass
        thread.join(timeout=5)


def frontend_websocket(ws, path: str):
    """Relay hot-reload WebSocket traffic to the dev server."""
    if not current_app.config['DEV_MODE']:
        ws.close(WS_CLOSE_INTERNAL_ERROR, 'WebSocket proxy is only available in development mode')
        return

    url = _dev_server_url('ws', path)
    protocol = request.headers.get('Sec-WebSocket-Protocol')
    subprotocols = [p.strip() for p in protocol.split(',')] if protocol else None

    try:
        upstream = Client.connect(url, subprotocols=subprotocols)
    except (OSError, ConnectionClosed) as e:
        logger.warning(f"WebSocket upstream unreachable at {url}: {e}")
        ws.close(WS_CLOSE_INTERNAL_ERROR, 'Development server unavailable')
        return

    logger.debug(f"Relaying WebSocket to {url}")
    relay_websocket(ws, upstream)


sock.route('/', bp=frontend_bp, defaults={'path': ''}, endpoint='websocket_root')(frontend_websocket)
sock.route('/<path:path>', bp=frontend_bp, endpoint='websocket_path')(frontend_websocket)
