# nth_from_back.py
from __future__ import annotations

"""
Nth element from the back of a singly linked list

What this file does:
- Two-pointer finder: leader runs n nodes ahead, follower lands on the answer
- Recursive finder: walks to the end, counts back while the stack unwinds
- Trace variants of both that record every cursor move / frame for the app
- Console demo (python nth_from_back.py)

Design notes:
- n is the distance from the tail, 0 is the last node.
- n < 0 is rejected by both finders before any traversal. Out of range n is
  not an error, the finders return None.
- The recursive finder uses one stack frame per node. Lists longer than the
  interpreter recursion limit raise RecursionError. Use the iterative finder
  for real work.
"""

from dotenv import load_dotenv
load_dotenv(override=True)

import os
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ds_linkedlist import ListNode, build_sequential

logger = logging.getLogger(__name__)

Steps = List[Dict[str, Any]]


# -----------------------------
# Config
# -----------------------------

def env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def env_int_list(name: str, default: List[int]) -> List[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return list(default)
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise ValueError(f"{name} must be comma separated integers, got {raw!r}") from None


def _check_offset(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("n must be greater than or equal to 0")


def _val(node: Optional[ListNode]) -> Any:
    return None if node is None else node.val


# -----------------------------
# Two pointers
# -----------------------------

def _two_pointer(head: Optional[ListNode], n: int, steps: Optional[Steps]) -> Optional[ListNode]:
    if head is None:
        return None

    leader = follower = head
    # leader goes n nodes ahead; running out here means the list is too short
    for _ in range(n):
        if not leader.next:
            return None
        leader = leader.next
        if steps is not None:
            steps.append({"step": len(steps), "phase": "lead", "leader": leader.val, "follower": follower.val})

    # gap between leader and follower stays n until leader is the tail
    while leader.next:
        leader = leader.next
        follower = follower.next
        if steps is not None:
            steps.append({"step": len(steps), "phase": "lockstep", "leader": leader.val, "follower": follower.val})

    return follower


def find_from_back_iterative(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """
    Return the node n positions before the tail, or None if the list is shorter
    than n + 1 nodes. Single pass, constant extra space.
    """
    _check_offset(n)
    found = _two_pointer(head, n, None)
    logger.debug("iterative n=%d -> %r", n, found)
    return found


def trace_from_back_iterative(head: Optional[ListNode], n: int) -> Tuple[Optional[ListNode], Steps]:
    _check_offset(n)
    steps: Steps = []
    found = _two_pointer(head, n, steps)
    return found, steps


# -----------------------------
# Recursion
# -----------------------------

@dataclass(frozen=True)
class _Unwind:
    candidate: Optional[ListNode]
    # distance of candidate from the tail; -1 means past the tail
    distance: int


def _find_from_back_counted(
    node: Optional[ListNode],
    n: int,
    depth: int = 0,
    steps: Optional[Steps] = None,
) -> _Unwind:
    if steps is not None:
        steps.append({
            "step": len(steps), "phase": "descend", "depth": depth,
            "node": _val(node), "distance": None, "candidate": None,
        })

    if node is None:
        out = _Unwind(candidate=None, distance=-1)
    else:
        inner = _find_from_back_counted(node.next, n, depth + 1, steps)
        if inner.distance == n:
            # already found deeper down, pass it through
            out = inner
        else:
            out = _Unwind(candidate=node, distance=inner.distance + 1)

    if steps is not None:
        steps.append({
            "step": len(steps), "phase": "unwind", "depth": depth,
            "node": _val(node), "distance": out.distance, "candidate": _val(out.candidate),
        })
    return out


def _resolve(out: _Unwind, n: int) -> Optional[ListNode]:
    # distance never reached n: the list has fewer than n + 1 nodes
    if out.distance != n:
        return None
    return out.candidate


def find_from_back(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """
    Recursive variant of find_from_back_iterative.

    Same result, but holds one stack frame per node, so a list longer than
    sys.getrecursionlimit() raises RecursionError.
    """
    _check_offset(n)
    found = _resolve(_find_from_back_counted(head, n), n)
    logger.debug("recursive n=%d -> %r", n, found)
    return found


def trace_from_back(head: Optional[ListNode], n: int) -> Tuple[Optional[ListNode], Steps]:
    _check_offset(n)
    steps: Steps = []
    found = _resolve(_find_from_back_counted(head, n, 0, steps), n)
    return found, steps


# -----------------------------
# Main entry
# -----------------------------

def run_demo(size: int = 100, offsets: Tuple[int, int] = (5, 99)) -> Dict[str, Any]:
    head = build_sequential(size)
    iterative_n, recursive_n = offsets
    return {
        "size": size,
        "iterative": (iterative_n, find_from_back_iterative(head, iterative_n)),
        "recursive": (recursive_n, find_from_back(head, recursive_n)),
    }


def main() -> None:
    logging.basicConfig(
        level=os.getenv("NTH_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    offsets = env_int_list("NTH_DEMO_OFFSETS", [5, 99])
    if len(offsets) != 2:
        raise ValueError(f"NTH_DEMO_OFFSETS needs two values, got {offsets}")

    out = run_demo(size=env_int("NTH_LIST_SIZE", 100), offsets=(offsets[0], offsets[1]))
    for label in ("iterative", "recursive"):
        n, node = out[label]
        print(f"{label} n={n}: {node}")


if __name__ == "__main__":
    main()
