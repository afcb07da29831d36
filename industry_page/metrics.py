"""Prometheus metric definitions for the page controller."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

# --- Fault boundary ---

page_faults_total = Counter(
    "industry_page_faults_total",
    "Page controllers degraded to the error panel",
    labelnames=["page_kind"],
)

# --- Images ---

image_failures_total = Counter(
    "industry_page_image_failures_total",
    "Images that failed to load and fell back to a placeholder",
    labelnames=["image"],
)

# --- Reveal ---

markers_revealed_total = Counter(
    "industry_page_markers_revealed_total",
    "Markers transitioned to revealed",
)

# --- Scroll handling ---

scroll_handler_seconds = Histogram(
    "industry_page_scroll_handler_seconds",
    "Time spent in one scroll notification (state + reveal scan)",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)
