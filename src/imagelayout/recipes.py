"""YAML loader for image operation recipes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .core.errors import MissingDimension, RecipeError
from .raster.base import ThumbnailMode
from .layout.anchors import parse_anchor
from .layout.fit import parse_fit_mode

logger = logging.getLogger(__name__)


# Parameters accepted by each operation, mapped to whether they are required
OPERATIONS: dict[str, dict[str, bool]] = {
    "crop": {"width": True, "height": True, "anchor": False},
    "resize": {"width": False, "height": False, "preserve_aspect": False, "fit": False},
    "rotate": {"angle": True, "background_color": False, "background_alpha": False},
    "thumbnail": {
        "width": True,
        "height": True,
        "mode": False,
        "anchor": False,
        "background_color": False,
        "background_alpha": False,
    },
    "watermark": {"image": True, "anchor": False},
}


@dataclass(frozen=True)
class RecipeStep:
    """A single operation and its keyword arguments."""

    op: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Recipe:
    """An ordered chain of image operations."""

    name: str
    steps: tuple[RecipeStep, ...] = ()


class RecipeLoader:
    """Loads recipe definitions from YAML files.

    YAML format:
    ```yaml
    name: product_card
    steps:
      - op: resize
        width: 800
        fit: shrink_only
      - op: crop
        width: 600
        height: 600
        anchor: center
      - op: watermark
        image: logo.png
        anchor: bottom-right
    ```

    Anchors may be a token or an [x, y] list. Everything is validated at
    load time so that a bad recipe fails before any image is touched.
    """

    def __init__(self) -> None:
        self._cache: dict[Path, Recipe] = {}

    def load(self, path: str | Path) -> Recipe:
        """Load a recipe from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Parsed Recipe

        Raises:
            FileNotFoundError: If the file does not exist
            RecipeError: If the recipe is malformed
        """
        path = Path(path).resolve()
        if path in self._cache:
            return self._cache[path]

        with open(path) as f:
            data = yaml.safe_load(f)

        recipe = self._parse_recipe(data, default_name=path.stem)
        self._cache[path] = recipe
        logger.debug("loaded recipe %r from %s (%d steps)", recipe.name, path, len(recipe.steps))
        return recipe

    def load_string(self, yaml_string: str) -> Recipe:
        """Load a recipe from a YAML string."""
        data = yaml.safe_load(yaml_string)
        return self._parse_recipe(data, default_name="recipe")

    def clear_cache(self) -> None:
        """Clear the recipe cache."""
        self._cache.clear()

    def _parse_recipe(self, data: Any, default_name: str) -> Recipe:
        if not isinstance(data, dict):
            raise RecipeError("Recipe must be a mapping with a 'steps' list")

        steps_data = data.get("steps")
        if not isinstance(steps_data, list) or not steps_data:
            raise RecipeError("Recipe must define a non-empty 'steps' list")

        steps = tuple(self._parse_step(index, step) for index, step in enumerate(steps_data))
        return Recipe(name=str(data.get("name", default_name)), steps=steps)

    def _parse_step(self, index: int, data: Any) -> RecipeStep:
        if not isinstance(data, dict) or "op" not in data:
            raise RecipeError(f"Step {index} must be a mapping with an 'op' key")

        params = dict(data)
        op = params.pop("op")
        if not isinstance(op, str):
            raise RecipeError(f"Step {index}: operation must be a string, got {op!r}")
        allowed = OPERATIONS.get(op)
        if allowed is None:
            raise RecipeError(f"Step {index}: unknown operation {op!r}")

        unknown = sorted(set(params) - set(allowed))
        if unknown:
            raise RecipeError(f"Step {index} ({op}): unknown parameters {', '.join(unknown)}")

        missing = [name for name, required in allowed.items() if required and name not in params]
        if missing:
            raise RecipeError(f"Step {index} ({op}): missing parameters {', '.join(missing)}")

        if op == "resize" and "width" not in params and "height" not in params:
            raise MissingDimension(f"Step {index} (resize): specify at least one of width or height")

        return RecipeStep(op=op, params=self._convert_params(index, op, params))

    def _convert_params(self, index: int, op: str, params: dict[str, Any]) -> dict[str, Any]:
        """Convert YAML values to the types the processor expects."""
        converted = dict(params)

        if "anchor" in converted:
            converted["anchor"] = parse_anchor(converted["anchor"])

        if "fit" in converted:
            converted["fit"] = parse_fit_mode(converted["fit"])

        if "mode" in converted:
            try:
                converted["mode"] = ThumbnailMode(converted["mode"])
            except ValueError:
                raise RecipeError(
                    f"Step {index} ({op}): unknown thumbnail mode {converted['mode']!r}"
                ) from None

        # Unquoted hex like 000000 parses as an int, so colors must be strings
        if "background_color" in converted and not isinstance(converted["background_color"], str):
            raise RecipeError(f"Step {index} ({op}): background_color must be a quoted hex string")

        return converted
