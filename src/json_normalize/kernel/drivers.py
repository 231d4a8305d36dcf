"""Suspension strategies for the node walk.

``run_sync`` resolves child walks depth-first on an explicit stack, so nesting
depth is not bounded by the interpreter recursion limit. ``run_async`` gives
every child its own task and joins them with ``asyncio.gather``; it yields to
the event loop once per node so large inputs interleave with other work.
Both feed fragments back in positional order, never in completion order.

When several siblings fail, ``run_sync`` raises the first failure in
depth-first order while ``run_async`` raises the first one to complete, so the
error (and its ``path``) may differ between the two for the same input.
"""

import asyncio
from typing import Any, List, Sequence, Tuple

from json_normalize.kernel.serializer import Fragment, Walk


def _step(walk: Walk, sent: Any) -> Tuple[bool, Any]:
    """Resume a walk; returns (finished, children or fragment)."""
    try:
        return False, walk.send(sent)
    except StopIteration as stop:
        return True, stop.value


def run_sync(walk: Walk) -> Fragment:
    # Each frame: (suspended walk, its child walks, fragments collected so far).
    stack: List[Tuple[Walk, Sequence[Walk], List[Fragment]]] = []
    finished, result = _step(walk, None)
    while True:
        if not finished:
            stack.append((walk, result, []))
        elif not stack:
            return result
        else:
            stack[-1][2].append(result)

        parent, children, fragments = stack[-1]
        if len(fragments) < len(children):
            walk = children[len(fragments)]
            finished, result = _step(walk, None)
        else:
            stack.pop()
            walk = parent
            finished, result = _step(parent, fragments)


def _discard(task: "asyncio.Task[Fragment]") -> None:
    # Retrieve the outcome so late sibling failures are not reported as unhandled.
    if not task.cancelled():
        task.exception()


async def _join(walks: Sequence[Walk]) -> List[Fragment]:
    """Run child walks concurrently; the first failure wins."""
    if not walks:
        return []
    tasks = [asyncio.ensure_future(run_async(walk)) for walk in walks]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.add_done_callback(_discard)
        raise


async def run_async(walk: Walk) -> Fragment:
    await asyncio.sleep(0)
    finished, result = _step(walk, None)
    while not finished:
        fragments = await _join(result)
        finished, result = _step(walk, fragments)
    return result
