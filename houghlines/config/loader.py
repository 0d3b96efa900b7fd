# houghlines/config/loader.py
from pydantic_settings import BaseSettings
from omegaconf import OmegaConf, DictConfig, ListConfig
from dotenv import load_dotenv
from pathlib import Path
from typing import Iterable, Optional
import os, warnings

from houghlines.errors import InvalidConfigurationError
from houghlines.schema.types import HoughParams
from houghlines.utils.validators import make_params

class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    OUTPUT_ROOT: str = "./out"
    CFG_PROFILE: str = ""

CONFIG_ROOT = Path(__file__).resolve().parents[1] / "configs"
SECTIONS = ("hough", "edges", "render", "logging", "paths")

def _merge_layer(cfg, overlay, source: str):
    """
    Merge one overlay into cfg; a type clash with the defaults (e.g. `hough: 5`)
    raises InvalidConfigurationError.
    """
    try:
        merged = OmegaConf.merge(cfg, overlay)
    except Exception as e:
        raise InvalidConfigurationError(f"[loader] {source} does not fit the defaults: {e}") from e
    for section in SECTIONS:
        if not isinstance(merged.get(section), DictConfig):
            raise InvalidConfigurationError(
                f"[loader] {source}: '{section}' must be a mapping, got {merged.get(section)!r}")
    return merged

def _merge_yaml(cfg, path_obj):
    """
    Load YAML and merge into cfg.
    A missing file is a no-op; a top-level list is rejected since every section is a mapping.
    """
    p = Path(path_obj)
    if not p.exists():
        return cfg
    y = OmegaConf.load(p)
    if isinstance(y, ListConfig):
        raise InvalidConfigurationError(f"[loader] '{p}' has a top-level list; expected a mapping of sections")
    return _merge_layer(cfg, y, f"'{p}'")

def load_cfg(config_path: Optional[str] = None, overrides: Iterable[str] = ()) -> DictConfig:
    """
    Layering, later wins:
      configs/base.yaml -> configs/profiles/$CFG_PROFILE.yaml -> config_path -> dotlist overrides.
    """
    load_dotenv()

    def _env_resolver(var, default=None):
        return os.environ.get(var, default)
    OmegaConf.register_new_resolver("env", _env_resolver, replace=True)

    s = Settings()
    conf = OmegaConf.load(CONFIG_ROOT / "base.yaml")

    # ---- optional profile overlay ----
    if s.CFG_PROFILE:
        prof_path = CONFIG_ROOT / "profiles" / f"{s.CFG_PROFILE}.yaml"
        if prof_path.exists():
            conf = _merge_layer(conf, OmegaConf.load(prof_path), f"profile '{s.CFG_PROFILE}'")
        else:
            warnings.warn(f"[loader] profile '{s.CFG_PROFILE}' not found at {prof_path}")

    # ---- user file + command line ----
    if config_path:
        if not Path(config_path).exists():
            raise FileNotFoundError(f"config file not found: {config_path}")
        conf = _merge_yaml(conf, config_path)
    overrides = list(overrides)
    if overrides:
        conf = _merge_layer(conf, OmegaConf.from_dotlist(overrides), f"overrides {overrides}")

    conf.env = dict(s)
    return conf

def params_from_cfg(cfg) -> HoughParams:
    h = cfg.hough; e = cfg.edges
    return make_params(
        theta_axis_scale_factor=h.theta_axis_scale_factor,
        rho_axis_scale_factor=h.rho_axis_scale_factor,
        houghspace_filter_threshold=h.houghspace_filter_threshold,
        strict_clipping=bool(h.strict_clipping),
        edge_mode=str(e.mode),
        edge_threshold=e.threshold,
        min_contrast=e.min_contrast,
    )
