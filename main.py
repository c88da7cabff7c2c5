"""Entry point for the goban scoring command line interface.

This file exposes a small CLI utility that replays an SGF game record onto a
board, enters scoring mode and prints the score as JSON.  Stones the automatic
dead group inference got wrong can be toggled with ``--dead``.

Every option may also be given in a YAML or JSON configuration file passed
with ``--config``; command line values take precedence.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List

from core.board import OutOfRangeError
from input.sgf_to_input import convert

try:  # YAML is optional.  JSON configuration files work without it.
    import yaml
except Exception:  # pragma: no cover - YAML is not mandatory
    yaml = None


def _load_config(path: str | None) -> Dict[str, Any]:
    """Load optional YAML/JSON configuration file."""

    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            if path.endswith(".json"):
                return json.load(fh)
            if yaml is not None:
                return yaml.safe_load(fh) or {}
    except FileNotFoundError:
        logging.warning("Config file %s not found", path)
    except Exception as exc:  # pragma: no cover - generic safety
        logging.warning("Failed to load config %s: %s", path, exc)
    return {}


def _run_score(data: str, step: int | None, dead: List[str], show_board: bool) -> Dict[str, Any]:
    """Replay ``data`` and return the score report.

    Parameters
    ----------
    data:
        Path of the SGF file to score.
    step:
        Number of moves to replay, ``None`` for the whole game.
    dead:
        SGF coordinates of groups whose dead flag should be toggled.
    show_board:
        Print the scored diagram as well.
    """

    result = convert(data, step=step, dead=dead)
    logging.info("Scored %s: %s", data, result["score"]["result"])
    if show_board:
        print(result["score"]["diagram"])
    return result


def main(argv: List[str] | None = None) -> int:
    """Entry point for the ``goban-score`` command line tool."""
    parser = argparse.ArgumentParser(description="Score a Go position from an SGF file")
    parser.add_argument("--data", help="SGF file to score")
    parser.add_argument("--step", type=int, help="Number of moves to replay")
    parser.add_argument("--dead", action="append", help="SGF coordinate of a group to toggle dead")
    parser.add_argument("--show-board", action="store_true", help="Print the scored diagram")
    parser.add_argument("--config", help="Optional configuration YAML/JSON")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    config = _load_config(args.config)
    logging.debug("Loaded config: %s", config)

    data = args.data or config.get("data")
    if not data:
        parser.error("--data is required")
    step = args.step if args.step is not None else config.get("step")
    dead = args.dead if args.dead else list(config.get("dead", []))
    show_board = args.show_board or bool(config.get("show_board", False))

    try:
        result = _run_score(data, step, dead, show_board)
    except OutOfRangeError as exc:
        parser.error(f"--dead coordinate is off the board: {exc}")
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        return 1
    print(json.dumps({**result["score"], "metadata": result["metadata"]}, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
