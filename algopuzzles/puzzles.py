"""Small puzzles: restroom stalls, banned-digit counting and bracketed trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

FREE = "_"
TAKEN = "X"


def restroom_occupancy(n: int) -> list[str]:
    """States of ``n`` stalls as people arrive one by one.

    Each newcomer takes the middle stall (leaning left) of the first longest
    run of free stalls. One string per arrival, ``_`` free and ``X`` taken.
    """
    if n < 0:
        raise ValueError(f"stall count must not be negative, got {n}")
    stalls = [FREE] * n
    states = []
    for _ in range(n):
        start, length = _longest_free_run(stalls)
        stalls[start + (length - 1) // 2] = TAKEN
        states.append("".join(stalls))
    return states


def _longest_free_run(stalls: list[str]) -> tuple[int, int]:
    best_start, best_length = -1, 0
    run_start = None
    for index, stall in enumerate([*stalls, TAKEN]):
        if stall == FREE:
            if run_start is None:
                run_start = index
        elif run_start is not None:
            length = index - run_start
            if length > best_length:
                best_start, best_length = run_start, length
            run_start = None
    return best_start, best_length


def count_valid_numbers(low: int, high: int, limit: int, banned: Iterable[int]) -> int:
    """Count numbers in ``[low, high]`` with fewer than ``limit`` banned digits.

    A banned digit listed twice is counted twice.
    """
    if low < 0:
        raise ValueError(f"range must not start below zero, got {low}")
    banned_digits = list(banned)
    if any(not 0 <= digit <= 9 for digit in banned_digits):
        raise ValueError("banned digits must lie between 0 and 9")
    valid = 0
    for number in range(low, high + 1):
        digits = str(number) if number else ""
        hits = sum(digits.count(str(digit)) for digit in banned_digits)
        if hits < limit:
            valid += 1
    return valid


@dataclass
class Node:
    """A binary tree node."""

    val: int
    left: Node | None = None
    right: Node | None = None


def _groups(text: str) -> Iterator[str]:
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if depth == 0 and char != "(":
            raise ValueError(f"unexpected {char!r} in tree text")
        if char == "(":
            if depth == 0:
                start = index
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                yield text[start : index + 1]
    if depth:
        raise ValueError("unbalanced brackets in tree text")


def parse_tree(text: str) -> Node | None:
    """Build a tree from text such as ``(1(2()())(3()()))``; ``()`` is empty."""
    text = text.strip()
    if len(text) < 2 or text[0] != "(" or text[-1] != ")":
        raise ValueError(f"tree text must be enclosed in brackets: {text!r}")
    inner = text[1:-1]
    if not inner:
        return None
    cut = inner.find("(")
    digits = inner if cut < 0 else inner[:cut]
    if not digits.isdigit():
        raise ValueError(f"node value must be digits, got {digits!r}")
    children = list(_groups(inner[len(digits) :]))
    if len(children) > 2:
        raise ValueError("a node has at most two children")
    children += ["()"] * (2 - len(children))
    return Node(int(digits), parse_tree(children[0]), parse_tree(children[1]))


def sum_at_depth(root: Node | None, depth: int) -> int:
    """Sum of the values of the nodes ``depth`` levels below the root."""
    total = 0
    queue: deque[tuple[Node, int]] = deque()
    if root is not None:
        queue.append((root, 0))
    while queue:
        node, level = queue.popleft()
        if level == depth:
            total += node.val
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, level + 1))
    return total