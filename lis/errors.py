
class LisError(Exception):
    """ Base class for all lis errors"""
    kind = "Error"


class LisSyntaxError(LisError):
    """ Raised when the reader meets malformed input or a special form is malformed"""
    kind = "SyntaxError"


class LisUnboundName(LisError):
    """ Raised when a symbol is looked up but no binding exists"""
    kind = "UnboundName"

    def __init__(self, name):
        super().__init__(f"{name} is not defined")
        self.name = name


class LisTypeMismatch(LisError):
    """ Raised when a value of a specific variant is required and another was given"""
    kind = "TypeMismatch"


class LisNotCallable(LisError):
    """ Raised when a non-function value occupies operator position"""
    kind = "NotCallable"

    def __init__(self, rendered: str):
        super().__init__(f"cannot apply {rendered}")
        self.rendered = rendered


class LisArithmeticTypeError(LisError):
    """ Raised when a numeric primitive receives something other than Integer/Real"""
    kind = "ArithmeticTypeError"


class LisDivisionByZero(LisError):
    """ Raised when dividing by zero"""
    kind = "DivisionByZero"


class LisRecursionError(LisError):
    """ Raised when evaluation nests deeper than the host stack allows"""
    kind = "RecursionError"


class LisArithmeticOverflow(LisError):
    """ Raised when an Integer is too large to promote to a Real"""
    kind = "ArithmeticOverflow"
