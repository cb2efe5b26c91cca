#!/usr/bin/env python3
"""
Example: Library code that reports progress without knowing about terminals
"""

import time

from console_progress import CallbackSink, ConsoleProgressBar, ProgressSink


def checksum(blocks: int, progress: ProgressSink) -> int:
    total = 0
    for i in range(blocks):
        time.sleep(0.02)
        total = (total * 31 + i) % 1_000_003
        progress.report((i + 1) / blocks)
    return total


# Rendered as an animated line...
with ConsoleProgressBar() as bar:
    result = checksum(150, bar)
    bar.refresh()
print(f"\nchecksum: {result}")

# ...or collected by any callable
seen = []
checksum(10, CallbackSink(seen.append))
print(f"reported {len(seen)} updates, last = {seen[-1]:.0%}")
