from helpers.naive_scan import (
    NaiveCounts,
    split_terminated,
    naive_scan,
    naive_classify,
)


__all__ = [
    "NaiveCounts",
    "split_terminated",
    "naive_scan",
    "naive_classify",
]
