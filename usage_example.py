# usage_example.py
# Minimal usage example for numdiff.core.driver.NumericDiff.
# This file is not part of the numdiff package. For reference only.

import io

from numdiff import ComparisonOptions, NumericDiff

# Inputs (paths relative to the repository root)
options = ComparisonOptions(
    file1="tests/data/reference.dat",
    file2="tests/data/candidate.dat",
    tolerance=1e-2,            # percent
    threshold=1e-6,
    side_by_side=True,
    color_diff_digits=True,
)

# Compute, capturing the rendered output instead of writing to stdout
sink = io.StringIO()
result = NumericDiff(options, sink).run()

print(sink.getvalue(), end="")
print(
    f"{result.differing_line_count} of {result.compared_line_count} lines differ, "
    f"max percentage error: {result.max_percentage_error:g}%"
)

# Expected summary for the bundled data:
# 2 of 5 lines differ, max percentage error: 1e+99%

# Fatal errors (all subclasses of numdiff.NumdiffError):
# FileOpenError            -- a path cannot be opened
# ColumnCountMismatchError -- paired lines have different column counts
# LineCountMismatchError   -- one file has extra non-comment content
