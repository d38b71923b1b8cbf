"""
Module recovering the source location and argument text of an assertion call.
"""

from __future__ import annotations

import ast
import functools
import linecache
import sys
from dataclasses import dataclass
from types import FrameType


@dataclass(frozen=True)
class CallSite:
    """
    Location of an assertion call in user code.

    Attributes
    ----------
    file : str
        Source file name as seen by the interpreter
    line : int
        Line number of the call
    arguments : tuple[str, ...] | None
        Source text of each positional argument, or None when the source
        could not be recovered
    """
    file: str
    line: int
    arguments: tuple[str, ...] | None = None


    def argument(self, index: int, fallback: str) -> str:
        """
        Source text of the argument at ``index``, or ``fallback``.
        """
        if self.arguments is None or index >= len(self.arguments):
            return fallback
        return self.arguments[index]


@functools.lru_cache(maxsize=64)
def _parse(source: str) -> ast.Module | None:
    try:
        return ast.parse(source)
    except (SyntaxError, ValueError):
        return None


def _callee_name(node: ast.Call) -> str | None:
    if isinstance(node.func, ast.Name):
        return node.func.id
    if isinstance(node.func, ast.Attribute):
        return node.func.attr
    return None


def _instruction_position(frame: FrameType) -> tuple[int, int] | None:
    """
    Start line and column of the instruction ``frame`` is executing.

    Returns None on interpreters without ``co_positions`` (before 3.11).
    """
    positions = getattr(frame.f_code, "co_positions", None)
    if positions is None:
        return None
    for index, position in enumerate(positions()):
        if index == frame.f_lasti // 2:
            line, _, column, _ = position
            if line is None or column is None:
                return None
            return line, column
    return None


def _contains(node: ast.Call, position: tuple[int, int]) -> bool:
    start: tuple[int, int] = (node.lineno, node.col_offset)
    end: tuple[int, int] = (
        node.end_lineno or node.lineno,
        node.end_col_offset if node.end_col_offset is not None else node.col_offset,
    )
    return start <= position <= end


def _find_call(
    tree: ast.Module,
    line: int,
    names: set[str],
    position: tuple[int, int] | None = None,
) -> ast.Call | None:
    """
    Find the innermost call to one of ``names`` at the calling instruction.

    With a known instruction position the call must contain it. Without one
    the call only has to span ``line``; several calls on that line are then
    ambiguous and the last one wins.
    """
    found: ast.Call | None = None
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        if _callee_name(node) not in names:
            continue
        if position is not None:
            if not _contains(node, position):
                continue
        else:
            end_line: int = node.end_lineno or node.lineno
            if not node.lineno <= line <= end_line:
                continue
        if found is None or (node.lineno, node.col_offset) > (found.lineno, found.col_offset):
            found = node
    return found


def _argument_texts(
    source: str,
    call: ast.Call,
    parameters: tuple[str, ...],
) -> tuple[str, ...] | None:
    """
    Source text of the call arguments in parameter order.
    """
    nodes: list[ast.expr | None] = list(call.args[:len(parameters)])
    nodes += [None] * (len(parameters) - len(nodes))
    for keyword in call.keywords:
        if keyword.arg in parameters:
            nodes[parameters.index(keyword.arg)] = keyword.value

    texts: list[str] = []
    for node in nodes:
        if node is None:
            return None
        segment: str | None = ast.get_source_segment(source, node)
        if segment is None:
            return None
        # Collapse continuation lines of multi-line arguments
        texts.append(" ".join(part.strip() for part in segment.splitlines()))
    return tuple(texts)


def capture_call_site(depth: int, parameters: tuple[str, ...]) -> CallSite:
    """
    Describe the user call that led to the current assertion.

    Parameters
    ----------
    depth : int
        Number of frames between the caller of this function and the
        assertion helper the user called
    parameters : tuple[str, ...]
        Parameter names of that helper, used to match keyword arguments

    Returns
    -------
    CallSite
        File, line and, when the source is available, argument text
    """
    helper: FrameType = sys._getframe(depth + 1)
    user: FrameType | None = helper.f_back
    if user is None:
        return CallSite("<unknown>", 1)

    filename: str = user.f_code.co_filename
    line: int = user.f_lineno
    position: tuple[int, int] | None = _instruction_position(user)
    names: set[str] = {helper.f_code.co_name, helper.f_code.co_name.upper()}
    del helper, user

    linecache.checkcache(filename)
    source: str = "".join(linecache.getlines(filename))
    if not source:
        return CallSite(filename, line)

    tree: ast.Module | None = _parse(source)
    if tree is None:
        return CallSite(filename, line)

    call: ast.Call | None = _find_call(tree, line, names, position)
    if call is None and position is not None:
        call = _find_call(tree, line, names)
    if call is None:
        return CallSite(filename, line)

    return CallSite(filename, line, _argument_texts(source, call, parameters))
