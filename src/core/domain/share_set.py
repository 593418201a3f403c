"""
ShareSet — Модель входного набора долей

Immutable Pydantic модели, представляющие входной документ:

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

Ключ каждой доли — её абсцисса x; base может быть строкой или числом.
Полная совместимость с JSON Schema (core/contracts/schema/share_set.json).
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, Field, field_validator

from src.core.contracts import validate_share_set
from src.core.domain.point import Point
from src.core.math.radix import MAX_RADIX, MIN_RADIX, decode_radix

# Ключ служебной секции документа
KEYS_SECTION = "keys"


# =============================================================================
# NESTED MODELS
# =============================================================================


class ShareKeys(BaseModel):
    """Параметры схемы разделения: n долей, порог k."""

    n: int = Field(..., ge=1, description="Общее количество долей")
    k: int = Field(..., ge=1, description="Порог: минимальное количество долей")

    model_config = {"frozen": True}


class EncodedShare(BaseModel):
    """
    Одна доля в закодированном виде.

    value — строка цифр в системе счисления base.
    """

    x: int = Field(..., gt=0, description="Абсцисса доли (ключ документа)")
    base: int = Field(..., ge=MIN_RADIX, le=MAX_RADIX, description="Основание системы счисления")
    value: str = Field(..., min_length=1, description="Значение доли в системе base")

    model_config = {"frozen": True}

    def decode(self) -> Point:
        """
        Декодирование доли в точку (x, y).

        Raises:
            InvalidDigit: если value содержит цифру вне [0, base)
        """
        return Point(self.x, decode_radix(self.value, self.base))


# =============================================================================
# SHARE SET MODEL
# =============================================================================


class ShareSet(BaseModel):
    """
    Набор долей для threshold-реконструкции.

    Доли хранятся отсортированными по x.
    """

    keys: ShareKeys = Field(..., description="Параметры n / k")
    shares: tuple[EncodedShare, ...] = Field(default=(), description="Доли, отсортированные по x")

    model_config = {"frozen": True}

    @field_validator("shares")
    @classmethod
    def sort_by_abscissa(cls, v: tuple[EncodedShare, ...]) -> tuple[EncodedShare, ...]:
        return tuple(sorted(v, key=lambda share: share.x))

    @property
    def threshold(self) -> int:
        return self.keys.k

    @property
    def degree(self) -> int:
        """Степень полинома: k - 1."""
        return self.keys.k - 1

    def decode_points(self) -> list[Point]:
        """
        Декодирование всех долей.

        Ошибка в любой доле прерывает загрузку целиком: пропуск точки
        может сделать threshold-реконструкцию неверной.

        Raises:
            InvalidDigit: если значение доли некорректно для её base
        """
        return [share.decode() for share in self.shares]

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "ShareSet":
        """
        Построение модели из разобранного JSON документа.

        Сначала JSON Schema валидация, затем Pydantic.

        Raises:
            jsonschema.ValidationError: документ не соответствует схеме
            pydantic.ValidationError: значения вне допустимых диапазонов
        """
        validate_share_set(document)

        shares = [
            EncodedShare(x=int(key), base=entry["base"], value=entry["value"])
            for key, entry in document.items()
            if key != KEYS_SECTION
        ]
        return cls(keys=ShareKeys(**document[KEYS_SECTION]), shares=tuple(shares))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ShareSet":
        """
        Загрузка документа из UTF-8 JSON файла.

        Raises:
            OSError: файл не найден / не читается
            json.JSONDecodeError: файл не является валидным JSON
        """
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
        return cls.from_document(document)
