from agent_run_items.config.settings import RunItemSettings, configure_logging

__all__ = ["RunItemSettings", "configure_logging"]
