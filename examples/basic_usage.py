#!/usr/bin/env python3
"""
Example: Basic usage of Console Progress as a Python library
"""

import time

from console_progress import ConsoleProgressBar, Terminal

files = [f"chunk_{i:03d}.bin" for i in range(40)]

# Writing the label through the Terminal lets the bar know where it starts
terminal = Terminal()
terminal.write("Copying files... ")

with ConsoleProgressBar(terminal=terminal) as bar:
    bar.display_runtime = True
    bar.display_eta = True
    bar.redraw_whole_bar = True

    for i, name in enumerate(files):
        time.sleep(0.1)  # pretend to copy `name`
        bar.report((i + 1) / len(files))

    bar.refresh()

terminal.write("\n")
print(f"Copied {len(files)} file(s)")
