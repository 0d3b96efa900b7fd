# parameter validators
# houghlines/utils/validators.py
from __future__ import annotations
from typing import Dict, Any, List
from pydantic import ValidationError
from houghlines.errors import InvalidConfigurationError
from houghlines.schema.types import HoughParams

def validate_hough(h: Dict[str, Any]) -> List[str]:
    err=[]
    for k in ["theta_axis_scale_factor","rho_axis_scale_factor"]:
        if k not in h: continue
        v = h[k]
        if not isinstance(v, int) or isinstance(v, bool) or v < 1:
            err.append(f"{k} must be an integer >= 1 (got {v!r})")
    if "houghspace_filter_threshold" in h:
        v = h["houghspace_filter_threshold"]
        if not isinstance(v, int) or isinstance(v, bool) or v < 0:
            err.append(f"houghspace_filter_threshold must be an integer >= 0 (got {v!r})")
    return err

def make_params(**kw) -> HoughParams:
    """Build HoughParams, reporting every problem at once as InvalidConfigurationError."""
    err = validate_hough(kw)
    if err:
        raise InvalidConfigurationError("; ".join(err))
    try:
        return HoughParams(**kw)
    except ValidationError as e:
        msgs = [f"{'.'.join(map(str, x['loc']))}: {x['msg']}" for x in e.errors()]
        raise InvalidConfigurationError("; ".join(msgs)) from e
