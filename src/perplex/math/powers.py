"""
Powers — целые степени perplex-чисел

- powu(z, n), n >= 0: возведение в степень квадрированием, O(log n) умножений
- powi(z, n): для n < 0 сначала инверсия (None для light-like z), затем powu(|n|)

Альтернативный путь через матричную форму — см. matrix_form.matrix_powu.
"""

from typing import Optional

from src.perplex.domain.field import F, T
from src.perplex.domain.perplex import Perplex
from src.perplex.math.numerical_safeguards import validate_exponent


def powu(z: Perplex[T], n: int) -> Perplex[T]:
    """
    z^n для неотрицательного целого n (exponentiation by squaring).

    n = 0 даёт мультипликативную единицу в типе поля z.

    Raises:
        ValueError: Если n отрицательный или не целый

    Examples:
        >>> powu(Perplex(0.0, 1.0), 2)
        Perplex(t=1.0, x=0.0)
    """
    n = validate_exponent(n, allow_negative=False)

    result = z.unit_like()
    if n == 0:
        return result

    base = z
    while n > 1:
        if n % 2 == 1:
            result = result * base
        n //= 2
        base = base * base

    return result * base


def powi(z: Perplex[F], n: int) -> Optional[Perplex[F]]:
    """
    z^n для целого n любого знака.

    Returns:
        None если n < 0 и z light-like (не обратим)

    Raises:
        ValueError: Если n не целый
    """
    n = validate_exponent(n)

    if n < 0:
        z_inv = z.try_inverse()
        if z_inv is None:
            return None
        return powu(z_inv, -n)

    return powu(z, n)
