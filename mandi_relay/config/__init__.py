from mandi_relay.config.settings import settings, Settings

__all__ = ["settings", "Settings"]
