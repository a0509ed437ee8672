"""
JSON Schema Contract Validators

Контракты маркетплейса хранятся в пакете (schema/) и проверяются через
jsonschema (Draft 2020-12):
- product.json — запись inventory_snapshot (Product.model_dump(mode="json"))
- receipt.json — чек, выдаваемый транзакцией покупки

Денежные суммы в контрактах — десятичные строки (так pydantic
сериализует Decimal в JSON-режиме).
"""

import json
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


class Contract(str, Enum):
    """Контракт и одноимённый файл схемы."""

    PRODUCT = "product"
    RECEIPT = "receipt"


# =============================================================================
# LOADING
# =============================================================================


def load_schema(name: Union[Contract, str], schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Чтение схемы контракта с meta-валидацией.

    Args:
        name: Контракт или имя файла схемы без расширения
        schema_dir: Каталог схем

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если файла схемы нет
        ValueError: Если файл не является валидной JSON Schema
    """
    if isinstance(name, Contract):
        name = name.value
    schema_path = Path(schema_dir) / f"{name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
    return schema


@lru_cache(maxsize=None)
def contract_validator(contract: Contract) -> Draft202012Validator:
    """Валидатор пакетной схемы (один на контракт)."""
    return Draft202012Validator(load_schema(contract))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_product(data: Dict[str, Any]) -> None:
    """
    Проверка записи товара.

    Raises:
        jsonschema.ValidationError: Если запись не соответствует контракту
    """
    contract_validator(Contract.PRODUCT).validate(data)


def validate_receipt(data: Dict[str, Any]) -> None:
    """
    Проверка чека.

    Raises:
        jsonschema.ValidationError: Если чек не соответствует контракту
    """
    contract_validator(Contract.RECEIPT).validate(data)
