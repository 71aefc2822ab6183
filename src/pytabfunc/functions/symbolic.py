import logging
from typing import Union

import sympy as sp

from pytabfunc.core.interfaces import MathFunction

logger = logging.getLogger(__name__)


class SymbolicFunction(MathFunction):
    """
    A SymPy expression in one variable exposed as a MathFunction.

    The expression is lambdified once on construction; ``apply`` evaluates
    the compiled callable and always returns a Python float.

    Attributes:
        expr (sp.Expr): The symbolic expression.
        symbol (sp.Symbol): The free variable of ``expr``.
    """

    def __init__(self, expr: Union[sp.Expr, str, float], symbol: Union[sp.Symbol, str] = 'x'):
        if isinstance(symbol, str):
            symbol = sp.Symbol(symbol)
        if isinstance(expr, str):
            try:
                expr = sp.sympify(expr, locals={str(symbol): symbol})
            except (sp.SympifyError, TypeError) as e:
                raise ValueError(f"Cannot parse expression '{expr}': {e}") from e
        expr = sp.sympify(expr)
        extra = expr.free_symbols - {symbol}
        if extra:
            names = ", ".join(sorted(str(s) for s in extra))
            logger.error("Expression %s has unexpected free symbols: %s", expr, names)
            raise ValueError(f"Expression '{expr}' depends on symbols other than {symbol}: {names}")
        self._expr = expr
        self._symbol = symbol
        self._compiled = sp.lambdify(symbol, expr, 'math')
        logger.debug("SymbolicFunction compiled: f(%s) = %s", symbol, expr)

    @property
    def expr(self) -> sp.Expr:
        return self._expr

    @property
    def symbol(self) -> sp.Symbol:
        return self._symbol

    def apply(self, x: float) -> float:
        return float(self._compiled(float(x)))

    def derivative(self) -> "SymbolicFunction":
        """Exact first derivative with respect to ``symbol``."""
        d_expr = sp.diff(self._expr, self._symbol)
        logger.debug("d/d%s [%s] = %s", self._symbol, self._expr, d_expr)
        return SymbolicFunction(d_expr, self._symbol)

    def __repr__(self) -> str:
        return f"SymbolicFunction({self._expr}, {self._symbol})"
