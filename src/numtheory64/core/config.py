"""
NumberTheoryConfig — параметры кэшей и факторизации.

Значения по умолчанию: рост кэша простых ×1.5, таблицы мультипликативных
функций до одного миллиона, Pollard-rho со стартовой точкой 0 и не более
чем 1000 константами.
"""

from dataclasses import dataclass
from typing import Final


# =============================================================================
# DEFAULTS
# =============================================================================

# Минимальный множитель роста кэша простых чисел
CACHE_GROWTH_FACTOR_DEFAULT: Final[float] = 1.5

# Максимальный размер таблицы мультипликативной функции
TABLE_LIMIT_DEFAULT: Final[int] = 1_000_000

# Верхняя граница числа констант c в Pollard-rho
RHO_MAX_CONSTANTS_DEFAULT: Final[int] = 1000


@dataclass(frozen=True)
class NumberTheoryConfig:
    """Конфигурация кэшей и алгоритмов.

    - cache_growth_factor: новый предел кэша >= limit * factor
    - table_limit: выше этого n значения считаются через factor()
    - rho_start: x0 для Pollard-rho
    - rho_max_constants: сколько констант c = 1, 2, ... пробовать
    - sqrt_seed: seed поиска невычета в алгоритме Чиполлы
    """

    cache_growth_factor: float = CACHE_GROWTH_FACTOR_DEFAULT
    table_limit: int = TABLE_LIMIT_DEFAULT
    rho_start: int = 0
    rho_max_constants: int = RHO_MAX_CONSTANTS_DEFAULT
    sqrt_seed: int = 0

    def __post_init__(self) -> None:
        if self.cache_growth_factor <= 1.0:
            raise ValueError(
                f"cache_growth_factor must be > 1, got {self.cache_growth_factor}"
            )
        if self.table_limit < 1:
            raise ValueError(f"table_limit must be positive, got {self.table_limit}")
        if self.rho_start < 0:
            raise ValueError(f"rho_start must be non-negative, got {self.rho_start}")
        if self.rho_max_constants < 1:
            raise ValueError(
                f"rho_max_constants must be positive, got {self.rho_max_constants}"
            )


DEFAULT_CONFIG: Final[NumberTheoryConfig] = NumberTheoryConfig()
