"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema контрактов perplex-значений:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Условная обязательность sector.t для диагонали
- Round trip сериализации Perplex / HyperbolicPolar
"""

import json
import math
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.perplex import HyperbolicPolar, HyperbolicSector, Perplex, to_polar
from src.perplex.contracts import (
    HyperbolicPolarValidator,
    PerplexValidator,
    SchemaLoader,
    perplex_from_dict,
    perplex_to_dict,
    polar_from_dict,
    polar_to_dict,
    validate_hyperbolic_polar,
    validate_perplex,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_perplex():
    """Валидный perplex для тестирования."""
    return {"t": 2.0, "x": -1.0}


@pytest.fixture
def valid_polar():
    """Валидная полярная форма (сектор Up)."""
    return {"rho": 1.5, "theta": 0.25, "sector": {"kind": "up"}}


@pytest.fixture
def valid_diagonal_polar():
    """Валидная полярная форма light-like числа."""
    return {"rho": 0.0, "theta": "-inf", "sector": {"kind": "diagonal", "t": 3.0}}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("schema_name", ["perplex", "hyperbolic_polar"])
    def test_schemas_load(self, schema_name: str) -> None:
        """Схемы загружаются и проходят meta-validation"""
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает схему из кэша"""
        loader = SchemaLoader()
        assert loader.load_schema("perplex") is loader.load_schema("perplex")

    def test_missing_schema_raises(self) -> None:
        """Отсутствующая схема даёт FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("complex")

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """Отсутствующая директория схем даёт RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_raises(self, tmp_path: Path) -> None:
        """Невалидная JSON Schema отклоняется при загрузке"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# PERPLEX CONTRACT
# =============================================================================


class TestPerplexContract:
    """Тесты perplex.json"""

    def test_valid(self, valid_perplex) -> None:
        """Валидные данные проходят проверку"""
        validate_perplex(valid_perplex)
        assert PerplexValidator().is_valid(valid_perplex)

    def test_integers_are_numbers(self) -> None:
        """Целые числа допустимы как компоненты"""
        validate_perplex({"t": 1, "x": 0})

    @pytest.mark.parametrize("missing", ["t", "x"])
    def test_missing_required_field(self, valid_perplex, missing: str) -> None:
        """Отсутствие t или x детектируется"""
        del valid_perplex[missing]
        with pytest.raises(ValidationError, match=f"'{missing}' is a required property"):
            validate_perplex(valid_perplex)

    def test_extra_field_rejected(self, valid_perplex) -> None:
        """Лишние поля запрещены"""
        valid_perplex["y"] = 0.0
        with pytest.raises(ValidationError):
            validate_perplex(valid_perplex)

    def test_wrong_type_rejected(self, valid_perplex) -> None:
        """Строка вместо числа отклоняется"""
        valid_perplex["t"] = "2.0"
        assert not PerplexValidator().is_valid(valid_perplex)

    def test_iter_errors_reports_all(self) -> None:
        """iter_errors возвращает все ошибки, а не первую"""
        errors = list(PerplexValidator().iter_errors({"t": "a", "x": "b"}))
        assert len(errors) == 2


# =============================================================================
# HYPERBOLIC POLAR CONTRACT
# =============================================================================


class TestHyperbolicPolarContract:
    """Тесты hyperbolic_polar.json"""

    def test_valid(self, valid_polar) -> None:
        """Валидные данные проходят проверку"""
        validate_hyperbolic_polar(valid_polar)

    def test_valid_diagonal(self, valid_diagonal_polar) -> None:
        """Диагональный сектор с t и бесконечным theta валиден"""
        validate_hyperbolic_polar(valid_diagonal_polar)

    def test_diagonal_without_t_rejected(self, valid_diagonal_polar) -> None:
        """Диагональный сектор требует t"""
        del valid_diagonal_polar["sector"]["t"]
        with pytest.raises(ValidationError):
            validate_hyperbolic_polar(valid_diagonal_polar)

    def test_regular_sector_with_t_rejected(self, valid_polar) -> None:
        """Обычный сектор не несёт t"""
        valid_polar["sector"]["t"] = 1.0
        with pytest.raises(ValidationError):
            validate_hyperbolic_polar(valid_polar)

    def test_unknown_sector_rejected(self, valid_polar) -> None:
        """Неизвестный сектор отклоняется"""
        valid_polar["sector"]["kind"] = "center"
        assert not HyperbolicPolarValidator().is_valid(valid_polar)

    def test_negative_rho_rejected(self, valid_polar) -> None:
        """rho не может быть отрицательным"""
        valid_polar["rho"] = -1.0
        with pytest.raises(ValidationError):
            validate_hyperbolic_polar(valid_polar)

    @pytest.mark.parametrize("theta", ["inf", "Infinity", None])
    def test_invalid_theta_rejected(self, valid_polar, theta) -> None:
        """theta — число или строка "+inf"/"-inf\""""
        valid_polar["theta"] = theta
        with pytest.raises(ValidationError):
            validate_hyperbolic_polar(valid_polar)


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestSerialization:
    """Round trip dict ↔ значения"""

    def test_perplex_to_dict(self) -> None:
        """Perplex сериализуется в {t, x}"""
        assert perplex_to_dict(Perplex(2.0, -1.0)) == {"t": 2.0, "x": -1.0}

    def test_perplex_round_trip_through_json(self) -> None:
        """Perplex переживает round trip через JSON"""
        z = Perplex(1.25, -3.5)
        assert perplex_from_dict(json.loads(json.dumps(perplex_to_dict(z)))) == z

    def test_perplex_float32_serialized_as_float(self) -> None:
        """float32 сериализуется как Python float"""
        data = perplex_to_dict(Perplex.of(1.5, 0.5, dtype="float32"))
        assert type(data["t"]) is float

    def test_perplex_from_invalid_dict_raises(self) -> None:
        """Десериализация валидирует вход"""
        with pytest.raises(ValidationError):
            perplex_from_dict({"t": 1.0})

    def test_polar_to_dict_default(self) -> None:
        """Полярная единица сериализуется без payload сектора"""
        assert polar_to_dict(HyperbolicPolar()) == {
            "rho": 1.0,
            "theta": 0.0,
            "sector": {"kind": "right"},
        }

    def test_polar_to_dict_diagonal(self) -> None:
        """Диагональ сериализуется с t и theta "-inf\""""
        data = polar_to_dict(to_polar(Perplex(2.0, -2.0)))
        assert data == {"rho": 0.0, "theta": "-inf", "sector": {"kind": "diagonal", "t": 2.0}}
        validate_hyperbolic_polar(data)

    @pytest.mark.parametrize(
        "z",
        [
            Perplex(2.0, 1.0),
            Perplex(1.0, 2.0),
            Perplex(-2.0, 1.0),
            Perplex(1.0, -2.0),
            Perplex(3.0, 3.0),
            Perplex(3.0, -3.0),
        ],
    )
    def test_polar_round_trip_through_json(self, z: Perplex) -> None:
        """Полярная форма переживает round trip через JSON во всех секторах"""
        polar = to_polar(z)
        restored = polar_from_dict(json.loads(json.dumps(polar_to_dict(polar))))
        assert restored.sector == polar.sector
        assert restored.to_perplex().abs_diff_eq(z, epsilon=1e-12)

    def test_polar_from_dict_diagonal(self, valid_diagonal_polar) -> None:
        """Диагональ восстанавливается с бесконечным theta"""
        polar = polar_from_dict(valid_diagonal_polar)
        assert polar.sector == HyperbolicSector.diagonal(3.0)
        assert polar.theta == -math.inf
        assert polar.to_perplex() == Perplex(3.0, -3.0)

    def test_polar_from_invalid_dict_raises(self, valid_polar) -> None:
        """Диагональ без t отклоняется при десериализации"""
        valid_polar["sector"] = {"kind": "diagonal"}
        with pytest.raises(ValidationError):
            polar_from_dict(valid_polar)
