"""Console rendering: task lines, list projection, themes."""
