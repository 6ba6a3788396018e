"""Exceptions raised by the geometry layer and its collaborators."""


class ImageLayoutError(ValueError):
    """Base class for all imagelayout errors."""


class InvalidAnchor(ImageLayoutError):
    """Unrecognized symbolic anchor or malformed explicit offset."""


class InvalidFitMode(ImageLayoutError):
    """Fit mode outside of the FitMode enumeration."""


class MissingDimension(ImageLayoutError):
    """Neither width nor height was given."""


class InvalidDimension(ImageLayoutError):
    """A width or height is not a positive integer."""


class RecipeError(ImageLayoutError):
    """A recipe definition is malformed."""
