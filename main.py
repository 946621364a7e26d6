"""js-static-analyzer - Entry point.

Usage:
    python main.py [PATH] [--log-level LEVEL] [--log-file PATH] [--no-color]
"""

from js_static_analyzer.server.runner import main

if __name__ == "__main__":
    main()
