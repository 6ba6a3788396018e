"""Layout geometry: anchors, fit policy, dimensions and operation plans."""

from .anchors import Anchor, parse_anchor, resolve_anchor
from .fit import FitMode, parse_fit_mode, should_resize
from .dimensions import plan_dimensions
from .planner import LayoutPlan, LayoutPlanner, plan_crop, plan_resize, plan_thumbnail, plan_watermark

__all__ = [
    "Anchor",
    "parse_anchor",
    "resolve_anchor",
    "FitMode",
    "parse_fit_mode",
    "should_resize",
    "plan_dimensions",
    "LayoutPlan",
    "LayoutPlanner",
    "plan_crop",
    "plan_resize",
    "plan_thumbnail",
    "plan_watermark",
]
