from .greeks_engine_config import GreeksEngineConfig

__all__ = [
    "GreeksEngineConfig",
]
