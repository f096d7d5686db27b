from __future__ import annotations
import argparse, json, os, re, subprocess, sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

PYTHON_EXE = sys.executable
TIMEOUT_RC = 124
SANDBOX_MODULE = "assignment1._sandbox_entry"

_COUNT_RE = re.compile(r"(\d+)\s+(passed|failed|error|errors|skipped|xfailed|xpassed)", re.I)

# Directory holding the installed `assignment1` package (src/ or site-packages).
_IMPORT_ROOT = Path(__file__).resolve().parents[1]

def parse_summary(text: str) -> Dict[str, Any]:
    """Pull passed/failed counts out of the last pytest summary line in `text`.

    Collection errors are folded into `failed` so a broken test module never
    reads as green.
    """
    passed = failed = 0
    for line in text.splitlines()[::-1]:
        pairs = _COUNT_RE.findall(line)
        if not pairs:
            continue
        for num, label in pairs:
            lab = label.lower()
            if lab == "passed":
                passed = int(num)
            elif lab in ("failed", "error", "errors"):
                failed += int(num)
        break
    total = passed + failed
    pass_frac = (passed / total) if total else 0.0
    return {"passed": passed, "failed": failed, "total": total, "pass_frac": pass_frac}

def _child_env() -> Dict[str, str]:
    # The child must import the sandbox module even when run from an unrelated root.
    env = dict(os.environ)
    extra = str(_IMPORT_ROOT)
    env["PYTHONPATH"] = extra + (os.pathsep + env["PYTHONPATH"] if env.get("PYTHONPATH") else "")
    return env

def _as_text(data: Union[str, bytes, None]) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode(errors="replace")
    return data

def run_tests(
    tests: Optional[List[str]] = None,
    timeout_s: int = 5,
    root: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """Check assignment tests in a sandboxed pytest child.

    `tests` are node ids or paths resolved against `root`, which defaults to
    the current working directory; with no tests the child runs `tests/`.
    The child gets `timeout_s` seconds of CPU and one extra second of wall
    clock. A child killed on the wall clock reports returncode 124.

    Returns the parsed summary plus `stdout` and `returncode`.
    """
    workdir = Path(root) if root is not None else Path.cwd()
    cmd = [PYTHON_EXE, "-m", SANDBOX_MODULE, "--timeout", str(timeout_s), *(tests or [])]

    try:
        child = subprocess.run(
            cmd,
            cwd=str(workdir),
            env=_child_env(),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            timeout=max(1, timeout_s + 1),
            text=True,
        )
        out, rc = child.stdout, child.returncode
    except subprocess.TimeoutExpired as e:
        out = _as_text(e.stdout) + "\nTIMEOUT: assignment check exceeded wall clock."
        rc = TIMEOUT_RC

    res = parse_summary(out)
    res["stdout"] = out
    res["returncode"] = rc
    return res

def format_summary(res: Dict[str, Any], tail_lines: int = 10) -> str:
    counts = {k: res.get(k) for k in ("passed", "failed", "total", "returncode")}
    counts["pass_frac"] = round(res.get("pass_frac", 0.0), 3)
    tail = res.get("stdout", "").splitlines()[-tail_lines:]
    return "\n".join([json.dumps(counts, indent=2), "", "--- pytest tail ---", *tail])

def is_green(res: Dict[str, Any]) -> bool:
    return res.get("failed", 1) == 0 and res.get("returncode", 1) == 0

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="assignment1.verify",
        description="Run assignment tests in the sandbox and summarise the result.",
    )
    ap.add_argument("--tests", nargs="*", default=None, help="PyTest node ids or paths")
    ap.add_argument("--timeout", type=int, default=5)
    ap.add_argument("--root", default=None, help="Directory the tests resolve against (default: cwd)")
    args = ap.parse_args(argv)

    res = run_tests(args.tests, timeout_s=args.timeout, root=args.root)
    print(format_summary(res))
    return 0 if is_green(res) else 1

if __name__ == "__main__":
    raise SystemExit(main())
