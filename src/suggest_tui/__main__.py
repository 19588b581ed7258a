from __future__ import annotations
import argparse, curses, logging, os, sys
from suggest_core import Engine
from suggest_core import config as CFG
from .loop import InputLoop
from .screen import CursesTerminal

log = logging.getLogger("suggest_tui")


def _resolve_source(path: str | None) -> str | None:
    if path:
        return path
    if os.path.exists(CFG.DEFAULT_FRAGMENTS_FILE):
        return CFG.DEFAULT_FRAGMENTS_FILE
    return None


def main(argv: list[str] | None = None, terminal_factory=CursesTerminal) -> int:
    p = argparse.ArgumentParser(
        prog="tailsuggest",
        description="Suggest previously seen lines that continue what you type (Ctrl-C to finish)",
    )
    p.add_argument("fragments", nargs="?", default=None,
                   help=f"File with one fragment per line (default: ./{CFG.DEFAULT_FRAGMENTS_FILE} if present)")
    p.add_argument("--overflow", choices=["clip", "suppress"], default=CFG.OVERFLOW_POLICY,
                   help="Fragments whose overlap reaches past column 0: clip their head or skip them")
    p.add_argument("--matcher", choices=["prefix-function", "naive"], default=CFG.OVERLAP_ALGORITHM,
                   help="Overlap algorithm")
    p.add_argument("--log-file", default=CFG.LOG_FILE, help="Where --verbose logs go")
    p.add_argument("--verbose", action="store_true", default=CFG.VERBOSE)

    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, filename=args.log_file,
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    source = _resolve_source(args.fragments)
    if source is None:
        print(f"Usage: tailsuggest FRAGMENTS_FILE  (no file given and ./{CFG.DEFAULT_FRAGMENTS_FILE} not found)")
        return 0

    eng = Engine(matcher=args.matcher, overflow=args.overflow)
    try:
        try:
            eng.build(source)
        except OSError as e:
            log.error("Cannot load fragments: %s", e)
            print(f"error: cannot load fragments: {e}", file=sys.stderr)
            return 1

        try:
            text = InputLoop(terminal_factory(), eng).run()
        except (curses.error, OSError) as e:
            log.error("Terminal failure: %s", e)
            print(f"error: terminal failure: {e}", file=sys.stderr)
            return 1

        # terminal is restored by now
        print(text)
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
