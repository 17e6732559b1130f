class Forecast24Error(Exception): ...


class ModeError(Forecast24Error): ...


class AreaError(Forecast24Error): ...


class ConfigError(Forecast24Error): ...


class ApiError(Forecast24Error): ...


def require(
    condition: bool, message: str, exc: type[Forecast24Error] = Forecast24Error
):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
