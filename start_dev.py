#!/usr/bin/env python3
"""
Cyber Law Readiness Assessment - Development Server Launcher

Usage:
    python start_dev.py              # Serve on 127.0.0.1:5101 and open the overview
    python start_dev.py --port 8080  # Use custom port
    python start_dev.py --no-browser # Don't open browser
"""

import os
import sys
import argparse
import threading
import webbrowser
from pathlib import Path

MIN_PYTHON = (3, 8)
REQUIRED_MODULES = ('flask', 'flask_limiter')


def check_python_version():
    """Return an error message if the interpreter is too old"""
    if sys.version_info < MIN_PYTHON:
        found = '.'.join(str(part) for part in sys.version_info[:3])
        return f"Python {MIN_PYTHON[0]}.{MIN_PYTHON[1]}+ required (found {found})"
    return None


def check_dependencies():
    """Names of required modules that fail to import"""
    missing = []
    for module in REQUIRED_MODULES:
        try:
            __import__(module)
        except ImportError:
            missing.append(module)
    return missing


def main():
    parser = argparse.ArgumentParser(description='Cyber Law Readiness Assessment development server')
    parser.add_argument('--port', type=int, default=5101, help='Port to run server on (default: 5101)')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind to (default: 127.0.0.1)')
    parser.add_argument('--no-browser', action='store_true', help='Do not open browser automatically')
    args = parser.parse_args()

    print("=" * 60)
    print("  Cyber Law Readiness Assessment (development)")
    print("=" * 60)

    problem = check_python_version()
    if problem:
        sys.exit(problem)

    missing = check_dependencies()
    if missing:
        sys.exit(f"Missing modules: {', '.join(missing)} (run: pip install -e .)")

    os.environ.setdefault('FLASK_ENV', 'development')
    os.environ.setdefault('FLASK_DEBUG', 'True')

    sys.path.insert(0, str(Path(__file__).parent))
    from web.app import create_app

    app = create_app()
    url = f"http://{args.host}:{args.port}/api/assessment/overview"

    # The reloader re-runs this script; only the parent opens the browser
    if not args.no_browser and os.environ.get('WERKZEUG_RUN_MAIN') != 'true':
        threading.Timer(2.0, webbrowser.open, args=(url,)).start()

    print(f"  Serving {url}")
    try:
        app.run(debug=True, host=args.host, port=args.port, use_reloader=True)
    except KeyboardInterrupt:
        print("Server stopped.")


if __name__ == '__main__':
    main()
