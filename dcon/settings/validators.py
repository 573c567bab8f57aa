"""Валидаторы значений настроек."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Tuple

ValidationResult = Tuple[bool, str]


class Validator(ABC):
    """Абстрактный валидатор значения."""

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """Возвращает (True, "") при успехе либо (False, описание ошибки)."""


class TypeValidator(Validator):
    """Проверяет тип значения; bool не считается числом."""

    def __init__(self, expected_type: type | Tuple[type, ...]) -> None:
        self.expected_type = expected_type

    def _expected_types(self) -> Tuple[type, ...]:
        if isinstance(self.expected_type, tuple):
            return self.expected_type
        return (self.expected_type,)

    def validate(self, value: Any) -> ValidationResult:
        expected = self._expected_types()
        if isinstance(value, bool) and bool not in expected:
            return False, f"Expected value of type {self._describe(expected)}, got bool"
        if isinstance(value, expected):
            return True, ""
        return (
            False,
            f"Expected value of type {self._describe(expected)}, got {type(value).__name__}",
        )

    @staticmethod
    def _describe(expected: Tuple[type, ...]) -> str:
        return ", ".join(item.__name__ for item in expected)


class RangeValidator(Validator):
    """Контролирует, что число лежит в закрытом диапазоне."""

    def __init__(self, min_value: Optional[int] = None, max_value: Optional[int] = None) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False, f"Value {value!r} is not a number"
        if self.min_value is not None and value < self.min_value:
            return False, f"Value {value} is below minimum {self.min_value}"
        if self.max_value is not None and value > self.max_value:
            return False, f"Value {value} is above maximum {self.max_value}"
        return True, ""


class EnumValidator(Validator):
    """Проверяет, что значение принадлежит конечному набору."""

    def __init__(self, allowed_values: Iterable[Any]) -> None:
        self.allowed_values = list(allowed_values)

    def validate(self, value: Any) -> ValidationResult:
        if value in self.allowed_values:
            return True, ""
        return False, f"Value {value!r} not in allowed values: {self.allowed_values}"


class CompositeValidator(Validator):
    """Применяет валидаторы по очереди и возвращает первую ошибку."""

    def __init__(self, validators: Iterable[Validator]) -> None:
        self.validators: List[Validator] = list(validators)

    def validate(self, value: Any) -> ValidationResult:
        for validator in self.validators:
            is_valid, error = validator.validate(value)
            if not is_valid:
                return False, error
        return True, ""
