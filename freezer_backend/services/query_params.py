"""Query string helpers shared by the list endpoints."""
from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import FreezerAPIError

ModelT = TypeVar("ModelT", bound=BaseModel)


def empty_string_as_none(params: Mapping[str, str | None]) -> dict[str, str]:
    """Drop parameters that are missing or sent empty (`?productName=`), so model defaults apply."""
    return {key: value for key, value in params.items() if value is not None and value != ""}


def parse_query(
    model: type[ModelT],
    params: Mapping[str, str | None],
    error: type[FreezerAPIError],
) -> ModelT:
    """Validate raw camelCase query values into `model`, raising `error` on the first bad value."""
    try:
        return model.model_validate(empty_string_as_none(params))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise error(f"Failed to deserialize query string: {field}: {first['msg']}") from exc
