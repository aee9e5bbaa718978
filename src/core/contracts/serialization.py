"""
Sign Serialization — сериализация знака по имени варианта

Использует pydantic TypeAdapter, поэтому Sign внутри pydantic-моделей
сериализуется так же: "Positive", "Negative", "Zero".
"""

from typing import Final, Union

from pydantic import TypeAdapter

from src.core.domain.sign import Sign

# Имена вариантов в порядке объявления
SIGN_NAMES: Final[tuple[str, ...]] = tuple(member.value for member in Sign)

_SIGN_ADAPTER: Final[TypeAdapter[Sign]] = TypeAdapter(Sign)


def dump_sign(sign: Sign) -> str:
    """
    Сериализация Sign в имя варианта.

    Examples:
        >>> dump_sign(Sign.NEGATIVE)
        'Negative'
    """
    return _SIGN_ADAPTER.dump_python(sign, mode="json")


def load_sign(name: str) -> Sign:
    """
    Десериализация Sign из имени варианта.

    Raises:
        pydantic.ValidationError: Если имя не является вариантом Sign
    """
    return _SIGN_ADAPTER.validate_python(name)


def dump_sign_json(sign: Sign) -> bytes:
    """Sign как JSON-строка, например b'"Zero"'."""
    return _SIGN_ADAPTER.dump_json(sign)


def load_sign_json(data: Union[str, bytes]) -> Sign:
    """
    Sign из JSON-строки.

    Raises:
        pydantic.ValidationError: Если JSON невалиден или имя неизвестно
    """
    return _SIGN_ADAPTER.validate_json(data)
