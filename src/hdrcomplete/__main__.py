from __future__ import annotations
import argparse, sys, json
from . import config as CFG
from .engine import Engine
from .errors import UnsupportedModeError
from .sysinc import default_system_paths, system_path_source


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="hdrcomplete", description="Complete #include directives from include paths")
    p.add_argument("--mode", default=CFG.DEFAULT_MODE, help="Editing mode (c, c++, objc)")
    p.add_argument("-I", "--user-path", action="append", dest="user_paths", default=None,
                   help="Directory for \"quoted\" includes (repeatable)")
    p.add_argument("--system-path", action="append", dest="system_paths", default=None,
                   help="Directory for <angle> includes (repeatable; default: platform heuristic)")
    p.add_argument("--no-system", action="store_true", help="Search no system directories")
    p.add_argument("--platform", default=None, help="Platform family for the system-path heuristic")
    p.add_argument("--q", default=None, help="Single line (up to the cursor) to complete once")
    p.add_argument("--repl", action="store_true", help="Interactive loop")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--list-system-paths", action="store_true", help="Print the detected system paths and exit")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    if args.list_system_paths:
        for d in default_system_paths(args.platform):
            print(d)
        return 0

    if args.no_system:
        system = []
    elif args.system_paths:
        system = args.system_paths
    elif args.platform:
        system = system_path_source(args.platform)
    else:
        system = None

    try:
        eng = Engine(args.mode, user_paths=args.user_paths, system_paths=system, verbose=args.verbose)
    except UnsupportedModeError as e:
        p.error(str(e))

    def run_query(line: str):
        rows = eng.complete_line(line)
        if args.json:
            print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
            return
        if not rows:
            print("(no matches)"); return
        print("#  Candidate                        Directory")
        for i, r in enumerate(rows, 1):
            print(f"{i:<2} {r.display_text:<32} {r.source_directory}")

    if args.q is not None:
        run_query(args.q)

    if args.repl:
        print("Type an include line, e.g. #include <std (empty line to exit).")
        while True:
            try:
                line = input("> ")
            except (EOFError, KeyboardInterrupt):
                break
            if not line.strip():
                break
            run_query(line)

    return 0

if __name__ == "__main__":
    sys.exit(main())
