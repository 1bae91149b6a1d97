from typing import Any, Mapping, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel

from contact_api.errors import ValidationError, field_errors

M = TypeVar("M", bound=BaseModel)


def validate(schema: Type[M], payload: Optional[Mapping[str, Any]]) -> M:
    """
    Перевіряє сирі дані запиту за схемою.

    :param schema: Pydantic модель запиту.
    :param payload: Сирі дані (тіло або параметри запиту).
    :return: Нормалізований екземпляр схеми.
    :raises ValidationError: Зі списком усіх помилок полів, а не лише першої.
    """
    if payload is None:
        payload = {}
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(field_errors(exc.errors())) from exc
