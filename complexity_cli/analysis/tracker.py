"""
Block-stack bookkeeping for one analysis run.

Only loop frames count toward the nesting depth; generic blocks are kept on
the stack so that their closing braces pop the right frame.
"""

from typing import Optional

from complexity_cli.analysis.models import AnalysisState, BlockFrame


def open_frame(state: AnalysisState, line: str, is_loop: bool) -> Optional[BlockFrame]:
    """Push the frame opened by ``line``, if any, and return it."""
    if is_loop:
        state.stack.append(BlockFrame.LOOP)
        state.depth += 1
        state.max_depth = max(state.max_depth, state.depth)
        return BlockFrame.LOOP
    if "{" in line:
        state.stack.append(BlockFrame.GENERIC_BLOCK)
        return BlockFrame.GENERIC_BLOCK
    return None


def close_frame(state: AnalysisState, line: str) -> Optional[BlockFrame]:
    """Pop one frame if ``line`` holds a closing brace. An empty stack is left alone."""
    if "}" not in line or not state.stack:
        return None
    frame = state.stack.pop()
    if frame is BlockFrame.LOOP:
        state.depth -= 1
    return frame
