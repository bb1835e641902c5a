"""Output-shaping options for path queries."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError

from ..domain.errors import InvalidOptionsError


class PathOptions(BaseModel):
    """Flags controlling the shape of ``PathFinder.path`` results.

    Attributes:
        trim: Exclude both the start and the goal from the returned path
        reverse: Return the path from goal to start
        cost: Return ``{"path": ..., "cost": ...}`` instead of a bare list
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    trim: StrictBool = False
    reverse: StrictBool = False
    cost: StrictBool = False


def resolve_options(options: Optional[Any] = None, **flags: Any) -> PathOptions:
    """Build a PathOptions from a mapping, an instance or nothing.

    Keyword flags are applied on top of ``options``.

    Raises:
        InvalidOptionsError: If ``options`` is of an unsupported type, has
            unknown keys or non-boolean values.
    """
    if options is None:
        values: dict = {}
    elif isinstance(options, PathOptions):
        if not flags:
            return options
        values = options.model_dump()
    elif isinstance(options, Mapping):
        if not all(isinstance(key, str) for key in options):
            raise InvalidOptionsError(
                "Option names must be strings",
                options=options,
            )
        values = dict(options)
    else:
        raise InvalidOptionsError(
            f"Options must be a mapping or PathOptions, got {type(options).__name__}",
            options=options,
        )

    values.update(flags)
    try:
        return PathOptions.model_validate(values)
    except ValidationError as e:
        raise InvalidOptionsError(
            "Invalid path options",
            options=options,
            cause=e,
        )
