"""Business Logic Services.

This package contains the service modules of the chat relay.

Service Categories:
- Connection: WebSocket transport, room subscriptions, emission
- Relay: Session/room registries and the relay engine
- Translation: Lexicon translation collaborator
- Session: WebSocket session orchestration
- Metrics: Prometheus instrumentation
"""
