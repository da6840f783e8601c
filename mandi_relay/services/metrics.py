"""Prometheus metrics instrumentation for the chat relay.

Metrics exported:
- relay_messages_total: Counter of send_message events by status
- relay_deliveries_total: Counter of per-recipient deliveries by outcome
- relay_translation_latency_seconds: Histogram of translation call time
- relay_active_connections: Gauge of live WebSocket connections
- relay_active_rooms: Gauge of rooms with at least one member

Usage:
    from mandi_relay.services.metrics import start_metrics_server, deliveries

    start_metrics_server(port=8001)
    deliveries.labels(outcome='translated').inc()
"""

from prometheus_client import Histogram, Counter, Gauge, start_http_server
import logging

logger = logging.getLogger(__name__)

# Inbound messages
messages_relayed = Counter(
    'relay_messages_total',
    'Total send_message events handled',
    labelnames=['status']  # status: accepted, rejected
)

# Per-recipient fan-out
deliveries = Counter(
    'relay_deliveries_total',
    'Per-recipient message deliveries',
    labelnames=['outcome']  # outcome: same_language, translated, low_confidence, failed
)

translation_latency = Histogram(
    'relay_translation_latency_seconds',
    'Time spent waiting on the translation service',
    labelnames=['language_pair']
)

active_connections_gauge = Gauge(
    'relay_active_connections',
    'Number of currently open WebSocket connections'
)

active_rooms_gauge = Gauge(
    'relay_active_rooms',
    'Number of rooms with at least one member'
)


def start_metrics_server(port: int = 8001):
    """Start Prometheus metrics HTTP server."""
    try:
        start_http_server(port)
        logger.info(f"✅ Metrics server started on port {port}")
    except Exception as e:
        logger.error(f"❌ Failed to start metrics server: {e}")
