from __future__ import annotations
import json
from typing import Any, Dict, List, Optional, cast

from . import verify
from .key_validation import Person, PersonKey, validate_keys
from .word_occurrences import count_word_occurrences

PERSON_1: Person = {"name": "Alice", "age": 25, "email": "alice@example.com"}
PRESENT_KEYS: List[PersonKey] = ["name", "age"]
# "address" is outside the Person key domain, so it needs a cast.
MISSING_KEYS = cast(List[PersonKey], ["name", "address"])

# One spec per assignment file. `demo` marks the calls the original driver printed.
TASKS: List[Dict[str, Any]] = [
    {
        "name": "count_word_occurrences",
        "source": "problem-3",
        "signature": "def count_word_occurrences(sentence: str, word: str) -> int:",
        "func": count_word_occurrences,
        "tests": ["tests/tasks/test_count_word_occurrences.py"],
        "examples": [
            {"args": ("I love typescript", "typescript"), "expected": 1, "demo": True},
            {"args": ("Typescript is great, I love TypeScript", "typescript"), "expected": 2},
            {"args": ("", "anything"), "expected": 0},
        ],
    },
    {
        "name": "validate_keys",
        "source": "problem-8",
        "signature": "def validate_keys(record: Mapping[K, Any], keys: Sequence[K]) -> bool:",
        "func": validate_keys,
        "tests": ["tests/tasks/test_validate_keys.py"],
        "examples": [
            {"args": (PERSON_1, PRESENT_KEYS), "expected": True, "demo": True},
            {"args": (PERSON_1, MISSING_KEYS), "expected": False, "demo": True},
        ],
    },
]

def get_task(name: str) -> Dict[str, Any]:
    for t in TASKS:
        if name in (t["name"], t["source"]):
            return t
    raise KeyError(f"unknown task {name!r}; choose from {[t['name'] for t in TASKS]}")

def _call_text(spec: Dict[str, Any], args: tuple) -> str:
    return f"{spec['name']}({', '.join(repr(a) for a in args)})"

def run_examples(spec: Dict[str, Any]) -> List[Dict[str, Any]]:
    rows = []
    for ex in spec["examples"]:
        actual = spec["func"](*ex["args"])
        rows.append({
            "call": _call_text(spec, ex["args"]),
            "expected": ex["expected"],
            "actual": actual,
            "ok": actual == ex["expected"],
        })
    return rows

def demo_lines() -> List[str]:
    """Console output of the original driver code, booleans spelled as in JSON."""
    out: List[str] = []
    for t in TASKS:
        for ex in t["examples"]:
            if ex.get("demo"):
                out.append(json.dumps(t["func"](*ex["args"])))
    return out

def eval_task(spec: Dict[str, Any], timeout_s: int = 5, root: Optional[str] = None) -> Dict[str, Any]:
    examples = run_examples(spec)
    res = verify.run_tests(spec["tests"], timeout_s=timeout_s, root=root)
    passed = (
        all(r["ok"] for r in examples)
        and res["returncode"] == 0
        and res["pass_frac"] == 1.0
    )
    return {
        "name": spec["name"],
        "source": spec["source"],
        "passed": passed,
        "examples": examples,
        "tests": {k: res[k] for k in ("passed", "failed", "total", "pass_frac", "returncode")},
    }

def eval_all(timeout_s: int = 5, root: Optional[str] = None) -> Dict[str, Any]:
    per = [eval_task(t, timeout_s=timeout_s, root=root) for t in TASKS]
    pass_count = sum(1 for r in per if r["passed"])
    return {"pass_frac": pass_count / len(per), "results": per}
