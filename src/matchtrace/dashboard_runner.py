# src/matchtrace/dashboard_runner.py

# CRITICAL: Monkey patch MUST be first, before any other imports
import eventlet
eventlet.monkey_patch()

import argparse
import os

from matchtrace.dashboard.server import create_app, socketio


def run_dashboard(host: str, port: int, debug: bool = False):
    app = create_app({"SOCKETIO_ASYNC_MODE": "eventlet"})

    print(f"[+] Starting dashboard at http://{host}:{port}")
    socketio.run(app, host=host, port=port, debug=debug)


def main():
    parser = argparse.ArgumentParser(description="String matching visualizer API + replay socket")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", 5000)),
                        help="Port to listen on (default: $PORT or 5000)")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    run_dashboard(args.host, args.port, debug=args.debug)


if __name__ == "__main__":
    main()
