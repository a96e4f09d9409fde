"""Configuration utilities."""

from threebody_sim.utils.config import load_config, save_config, config_from_dict, Config

__all__ = ["load_config", "save_config", "config_from_dict", "Config"]
