"""
tilegrid — entry point.

Usage:
    python -m tilegrid serve                 # start web server on :8000
    python -m tilegrid serve --port 3000
    python -m tilegrid describe layout.json  # print a layout report
"""

import json
import logging
import sys
from pathlib import Path


def main():
    args = sys.argv[1:]
    cmd = args[0] if args else "serve"

    if cmd == "serve":
        port = 8000
        host = "127.0.0.1"
        for i, a in enumerate(args):
            if a == "--port" and i + 1 < len(args):
                port = int(args[i + 1])
            elif a == "--host" and i + 1 < len(args):
                host = args[i + 1]

        logging.basicConfig(level=logging.INFO,
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        from tilegrid.web.server import main as serve
        serve(host=host, port=port)
    elif cmd == "describe" and len(args) == 2:
        from tilegrid.layout import describe_layout, parse_tiles

        data = json.loads(Path(args[1]).read_text(encoding="utf-8"))
        if isinstance(data, dict):
            data = data["tiles"]
        print(describe_layout(parse_tiles(data)))
    else:
        print(f"Unknown command: {' '.join(args)}")
        print("Usage: python -m tilegrid serve [--port PORT] [--host HOST]")
        print("       python -m tilegrid describe FILE.json")
        sys.exit(1)


if __name__ == "__main__":
    main()
