"""Exceptions raised by the analysis engine."""

from typing import Optional, Sequence


class TurnipAnalysisError(Exception):
    """Base class for analysis errors."""
    pass


class InvalidInputError(TurnipAnalysisError, ValueError):
    """Raised before traversal when the inputs are malformed or out of range."""
    pass


class InconsistentObservationsError(TurnipAnalysisError):
    """
    Raised when the observed prices rule out every pattern.

    This is a legitimate outcome for valid inputs (typos, or a week the
    model cannot explain), not a programming error.
    """

    def __init__(
        self,
        base_price: Optional[int] = None,
        prices: Sequence[Optional[int]] = (),
        step: Optional[int] = None,
    ):
        self.base_price = base_price
        self.prices = list(prices)
        self.step = step
        where = f" (ruled out at step {step})" if step is not None else ""
        if base_price is None:
            message = f"Observations do not match any known pattern{where}"
        else:
            message = (
                f"Prices {self.prices} with base price {base_price} do not "
                f"match any known pattern{where}"
            )
        super().__init__(message)
