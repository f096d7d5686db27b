from __future__ import annotations
import argparse, json, sys
from typing import List, Optional

from .harness import demo_lines, eval_all, eval_task, get_task
from .key_validation import validate_keys
from .word_occurrences import count_word_occurrences

def _cmd_demo(args) -> int:
    for line in demo_lines():
        print(line)
    return 0

def _cmd_count(args) -> int:
    print(count_word_occurrences(args.sentence, args.word))
    return 0

def _cmd_validate(args) -> int:
    try:
        record = json.loads(args.record)
    except json.JSONDecodeError as e:
        print(f"--record is not valid JSON: {e}", file=sys.stderr)
        return 2
    if not isinstance(record, dict):
        print(f"--record must be a JSON object, got {type(record).__name__}", file=sys.stderr)
        return 2
    print(json.dumps(validate_keys(record, args.keys)))
    return 0

def _cmd_check(args) -> int:
    if args.task:
        try:
            spec = get_task(args.task)
        except KeyError as e:
            print(e.args[0], file=sys.stderr)
            return 2
        res = eval_task(spec, timeout_s=args.timeout, root=args.root)
        ok = res["passed"]
    else:
        res = eval_all(timeout_s=args.timeout, root=args.root)
        ok = res["pass_frac"] == 1.0
    print(json.dumps(res, indent=2, default=str))
    return 0 if ok else 1

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="assignment1",
        description="Word occurrence counter and record key validator.",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("demo", help="Print the built-in example results")
    p.set_defaults(func=_cmd_demo)

    p = sub.add_parser("count", help="Count case-insensitive occurrences of WORD in SENTENCE")
    p.add_argument("sentence")
    p.add_argument("word")
    p.set_defaults(func=_cmd_count)

    p = sub.add_parser("validate", help="Check that every KEY is present in the JSON record")
    p.add_argument("--record", required=True, help='JSON object, e.g. \'{"name": "Alice"}\'')
    p.add_argument("keys", nargs="*")
    p.set_defaults(func=_cmd_validate)

    p = sub.add_parser("check", help="Run examples and task tests in the sandbox")
    p.add_argument("--task", default=None, help="Function or source name (e.g. problem-3)")
    p.add_argument("--root", default=None, help="Project directory holding tests/ (default: cwd)")
    p.add_argument("--timeout", type=int, default=5)
    p.set_defaults(func=_cmd_check)
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
