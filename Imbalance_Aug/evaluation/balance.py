"""
Text summary of class balance.
"""
from ..utils import group_lens


def checkbalance(y, ref='majority', show=True, width=50):
    """
    Render class sizes as a horizontal bar chart.

    One line per class, smallest first, e.g.::

        1: ▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇ 19 (39.6%)
        0: ▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇▇ 48 (100.0%)

    Args:
        y: Sequence of class labels.
        ref: Percentages are relative to the 'majority' class, the
            'minority' class, or the 'total' number of observations.
        show: Print the chart.
        width: Length of the longest bar.

    Returns:
        str: The chart.
    """
    counts = group_lens(y)
    if not counts:
        return ""
    if ref == 'majority':
        denom = max(counts.values())
    elif ref == 'minority':
        denom = min(counts.values())
    elif ref == 'total':
        denom = sum(counts.values())
    else:
        raise ValueError(f"ref must be 'majority', 'minority' or 'total', got {ref!r}")

    majority = max(counts.values())
    label_width = max(len(str(label)) for label in counts)
    lines = []
    for label, n in sorted(counts.items(), key=lambda item: item[1]):
        bar = "▇" * int(round(width * n / majority))
        lines.append(f"{str(label):>{label_width}}: {bar} {n} ({100 * n / denom:.1f}%)")
    chart = "\n".join(lines)
    if show:
        print(chart)
    return chart
