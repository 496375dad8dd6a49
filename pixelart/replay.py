"""Replay a recorded command script against a fresh editor.

Usage:
    python -m pixelart.replay SCRIPT.jsonl [OUT_DIR] [--config PATH]

Each non-empty line of the script is one command request, e.g.
{"method": "pointer_press", "params": {"x": 1, "y": 2}}. Lines starting
with '#' are skipped. Exports are written into OUT_DIR (default: current
directory). Responses are printed one per line.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .commands import CommandDispatcher
from .config import CONFIG_PATH, EditorConfig
from .editor import PixelEditor
from .host.savers import DirectorySaver

logger = logging.getLogger(__name__)

USAGE = "usage: python -m pixelart.replay SCRIPT.jsonl [OUT_DIR] [--config PATH]"


def replay(lines: Iterable[str], dispatcher: CommandDispatcher, out: TextIO) -> int:
    """Dispatch every command line. Returns the number of failed commands."""
    failures = 0
    for lineno, line in enumerate(lines, 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        response = json.loads(dispatcher.dispatch_line(line))
        if "error" in response:
            failures += 1
            logger.warning("Line %d: %s", lineno, response["error"])
        elif isinstance(response["result"], dict) and response["result"].get("ok") is False:
            failures += 1
            logger.warning("Line %d: %s", lineno, response["result"].get("error"))
        out.write(json.dumps(response) + "\n")
    return failures


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the replay CLI."""
    logging.basicConfig(level=logging.INFO, stream=sys.stderr, format="%(name)s %(levelname)s: %(message)s")
    args = list(sys.argv[1:] if argv is None else argv)

    config_path = CONFIG_PATH
    if "--config" in args:
        i = args.index("--config")
        if i + 1 >= len(args):
            print(USAGE, file=sys.stderr)
            return 2
        config_path = Path(args[i + 1])
        del args[i:i + 2]

    if not 1 <= len(args) <= 2:
        print(USAGE, file=sys.stderr)
        return 2

    script = Path(args[0])
    out_dir = Path(args[1]) if len(args) > 1 else Path.cwd()
    try:
        lines = script.read_text().splitlines()
    except OSError as e:
        print(f"Cannot read {script}: {e}", file=sys.stderr)
        return 2

    editor = PixelEditor(EditorConfig.load(config_path), saver=DirectorySaver(out_dir))
    failures = replay(lines, CommandDispatcher(editor), sys.stdout)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
