"""Exceptions raised by the pool math routines."""


class MathError(ArithmeticError):
    """Base class for every error raised by the pool math routines."""

    default_message = "math error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class MulDivOverflowError(MathError):
    """A full-precision multiply-divide overflowed 256 bits or divided by zero."""

    default_message = "mul_div overflow"


class AddDeltaOverflowError(MathError):
    """Adding a signed liquidity delta overflowed or underflowed."""

    default_message = "add_delta overflow"


class PriceOverflowError(MathError):
    """Removing token0 would push the price out of range."""

    default_message = "price overflow"


class SafeCastOverflowError(MathError):
    """A value does not fit into 160 bits."""

    default_message = "safe cast to uint160 overflow"


class InsufficientLiquidityError(MathError):
    """The liquidity is too small for the requested amount."""

    default_message = "insufficient liquidity"


class InvalidPriceOrLiquidityError(MathError):
    """The price or the liquidity is zero."""

    default_message = "invalid price or liquidity"


class InvalidPriceError(MathError):
    """A sqrt price of zero was given."""

    default_message = "invalid price"


class InvalidTickError(MathError):
    """A tick lies outside the supported range."""

    def __init__(self, tick):
        self.tick = tick
        super().__init__(f"invalid tick: {tick}")


class InvalidSqrtPriceError(MathError):
    """A sqrt price lies outside the supported range."""

    def __init__(self, sqrt_price_x96):
        self.sqrt_price_x96 = sqrt_price_x96
        super().__init__(f"invalid sqrt price: {sqrt_price_x96}")


class TickListError(MathError):
    """A lookup in a sorted tick list failed."""

    BELOW_SMALLEST = "BELOW_SMALLEST"
    AT_OR_ABOVE_LARGEST = "AT_OR_ABOVE_LARGEST"
    NOT_CONTAINED = "NOT_CONTAINED"

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f"tick list error: {reason}")