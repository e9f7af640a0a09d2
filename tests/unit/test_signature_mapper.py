"""
Тесты для Signature Mapper

Проверяемые инварианты:
1. Алфавит {L, R, I, 0, 1}, прочие символы → SignatureFormatError
2. Строка разбирается целиком до умножения
3. Умножение слева направо (обратный порядок даёт другую матрицу)
4. Унимодулярность результата
5. signature_of - обратная операция для сигнатур над {L, R}
"""

import random

import pytest

from stern_brocot.core.math import (
    IDENTITY,
    LEFT,
    RIGHT,
    Matrix2x2,
    determinant,
    multiply,
)
from stern_brocot.core.signature import (
    DEFAULT_ALPHABET,
    STEP_MATRICES,
    SignatureAlphabet,
    SignatureFormatError,
    Step,
    map_signature,
    normalize_signature,
    parse_signature,
    signature_of,
)
from stern_brocot.core.domain import Fraction
from stern_brocot.core.errors import SternBrocotError


def _random_signature(rng: random.Random, alphabet: str, length: int) -> str:
    return "".join(rng.choice(alphabet) for _ in range(length))


# =============================================================================
# ТЕСТЫ: parse_signature
# =============================================================================


class TestParseSignature:
    """Тесты разбора сигнатуры."""

    def test_canonical_symbols(self):
        assert parse_signature("LRI") == (Step.LEFT, Step.RIGHT, Step.IDENTITY)

    def test_digit_aliases(self):
        """'0' = L, '1' = R."""
        assert parse_signature("01") == (Step.LEFT, Step.RIGHT)

    def test_empty(self):
        assert parse_signature("") == ()

    @pytest.mark.parametrize("signature", ["X", "LRx", "l", "L R", "2", "LR\n"])
    def test_unknown_symbol_rejected(self, signature):
        with pytest.raises(SignatureFormatError, match="Unrecognized signature symbol"):
            parse_signature(signature)

    def test_error_reports_position(self):
        with pytest.raises(SignatureFormatError, match="position 2"):
            parse_signature("LRQ")

    def test_non_string_rejected(self):
        with pytest.raises(SignatureFormatError, match="must be a string"):
            parse_signature(["L", "R"])  # type: ignore

    def test_error_hierarchy(self):
        """SignatureFormatError - ValueError и SternBrocotError."""
        with pytest.raises(ValueError):
            parse_signature("?")
        with pytest.raises(SternBrocotError):
            parse_signature("?")


class TestSignatureAlphabet:
    """Тесты конфигурации алфавита."""

    def test_default_alphabet(self):
        assert DEFAULT_ALPHABET.step_for("L") is Step.LEFT
        assert DEFAULT_ALPHABET.step_for("1") is Step.RIGHT
        assert DEFAULT_ALPHABET.step_for("I") is Step.IDENTITY
        assert DEFAULT_ALPHABET.step_for("Z") is None

    def test_custom_alphabet(self):
        alphabet = SignatureAlphabet(
            left=frozenset({"<"}), right=frozenset({">"}), identity=frozenset({"."})
        )
        assert map_signature("<>><", alphabet) == map_signature("LRRL")

        with pytest.raises(SignatureFormatError):
            map_signature("L", alphabet)

    def test_overlapping_sets_rejected(self):
        with pytest.raises(ValueError, match="disjoint"):
            SignatureAlphabet(left=frozenset({"L"}), right=frozenset({"L"}))

    @pytest.mark.parametrize("symbol", ["LL", "", "<-"])
    def test_multi_character_symbol_rejected(self, symbol):
        """Символы алфавита - ровно один знак."""
        with pytest.raises(ValueError, match="single characters"):
            SignatureAlphabet(left=frozenset({symbol}))

    def test_step_matrices(self):
        assert STEP_MATRICES[Step.LEFT] == LEFT
        assert STEP_MATRICES[Step.RIGHT] == RIGHT
        assert STEP_MATRICES[Step.IDENTITY] == IDENTITY


# =============================================================================
# ТЕСТЫ: map_signature
# =============================================================================


class TestMapSignature:
    """Тесты отображения сигнатуры в матрицу."""

    def test_empty_is_identity(self):
        assert map_signature("") == IDENTITY

    def test_single_steps(self):
        assert map_signature("L") == Matrix2x2.from_rows([[1, 1], [0, 1]])
        assert map_signature("R") == Matrix2x2.from_rows([[1, 0], [1, 1]])
        assert map_signature("I") == IDENTITY

    def test_worked_example(self):
        """LRRL → [[3, 4], [2, 3]]."""
        m = map_signature("LRRL")
        assert m == Matrix2x2.from_rows([[3, 4], [2, 3]])
        assert determinant(m) == 1

    def test_digits_match_letters(self):
        assert map_signature("0110") == map_signature("LRRL")

    def test_identity_steps_ignored(self):
        assert map_signature("ILIRRIL") == map_signature("LRRL")

    @pytest.mark.parametrize("signature", ["LLR", "LRR", "RLL", "LRRR", "LLRLR"])
    def test_left_to_right_order(self, signature):
        """Произведение в порядке чтения, а не в обратном (сигнатуры не палиндромы)."""
        assert signature != signature[::-1]
        forward = IDENTITY
        backward = IDENTITY
        for symbol in signature:
            forward = multiply(forward, STEP_MATRICES[Step(symbol)])
            backward = multiply(STEP_MATRICES[Step(symbol)], backward)

        assert map_signature(signature) == forward
        assert map_signature(signature) != backward
        # Обратный порядок тоже унимодулярен - ошибка была бы незаметной
        assert abs(determinant(backward)) == 1

    def test_rejects_before_multiplying(self):
        """Неизвестный символ в конце длинной строки всё равно отвергается."""
        with pytest.raises(SignatureFormatError):
            map_signature("LR" * 1000 + "X")

    @pytest.mark.parametrize("seed", range(10))
    def test_random_signatures_unimodular(self, seed):
        """Любая допустимая сигнатура даёт det == ±1."""
        rng = random.Random(seed)
        signature = _random_signature(rng, "LRI01", rng.randint(0, 60))
        assert abs(determinant(map_signature(signature))) == 1


# =============================================================================
# ТЕСТЫ: normalize_signature / signature_of
# =============================================================================


class TestNormalizeSignature:
    """Тесты канонической формы."""

    def test_normalize(self):
        assert normalize_signature("0I11") == "LRR"
        assert normalize_signature("") == ""
        assert normalize_signature("III") == ""

    def test_normalized_maps_to_same_matrix(self):
        signature = "01IRL0"
        assert map_signature(normalize_signature(signature)) == map_signature(signature)


class TestSignatureOf:
    """Тесты обратного отображения дробь → сигнатура."""

    @pytest.mark.parametrize(
        "pair, expected",
        [
            ((1, 1), ""),
            ((1, 2), "L"),
            ((2, 1), "R"),
            ((5, 7), "LRRL"),
            ((1, 3), "LL"),
            ((3, 1), "RR"),
            ((3, 5), "LRL"),
        ],
    )
    def test_known_positions(self, pair, expected):
        assert signature_of(*pair) == expected

    @pytest.mark.parametrize("seed", range(10))
    def test_inverts_map_signature(self, seed):
        rng = random.Random(seed)
        signature = _random_signature(rng, "LR", rng.randint(0, 40))
        pair = Fraction.from_matrix(map_signature(signature)).to_pair()
        assert signature_of(*pair) == signature

    def test_large_quotients(self):
        """Длинные серии одинаковых шагов вычисляются через divmod."""
        assert signature_of(1, 10**6) == "L" * (10**6 - 1)

    @pytest.mark.parametrize("pair", [(0, 1), (1, 0), (-1, 2), (2, -1)])
    def test_non_positive_rejected(self, pair):
        with pytest.raises(ValueError, match="must be positive"):
            signature_of(*pair)

    def test_not_reduced_rejected(self):
        with pytest.raises(ValueError, match="not in lowest terms"):
            signature_of(2, 4)
