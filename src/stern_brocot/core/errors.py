"""
Базовые исключения библиотеки.

Конкретные исключения объявлены в модулях, где они возникают:
- SignatureFormatError (core.signature.mapper)
- MissingProvenanceError (core.domain.fraction)
- InvalidDepthError (core.domain.tree)
"""


class SternBrocotError(Exception):
    """Базовый класс для всех ошибок stern_brocot."""

    pass
